# ExpressionParser.py
"""""
Expression parser for the pow calculator.

Pipeline
--------
1) Tokenizer: converts a raw operation string into a flat list of tokens.
2) Parser (AST): builds a tree of Literal / Power nodes (recursive descent, '^' is right associative).

Grammar
-------
    expression := operand ( '^' expression )?
    operand    := LITERAL | '(' expression ')'
    LITERAL    := run of digits, '.' and '-'

A top-level operation must contain at least one '^'.
"""""

import logging

from . import error as E

logger = logging.getLogger(__name__)

LITERAL_CHARS = "0123456789.-"
WHITESPACE = " \t\r\n"
Operations = ["^"]


# -----------------------------
# AST node types
# -----------------------------

class Literal:
    """AST node for a numeric literal, kept as text until the numeric domain is known."""
    def __init__(self, text):
        self.text = text

    def __eq__(self, other):
        return isinstance(other, Literal) and self.text == other.text

    def __repr__(self):
        return f"Literal({self.text!r})"


class Power:
    """AST node for base ^ exponent.

    'grouped' records that the node was written inside '(' ')' in the input.
    """
    def __init__(self, base, exponent, grouped=False):
        self.base = base
        self.exponent = exponent
        self.grouped = grouped

    def __eq__(self, other):
        return (isinstance(other, Power)
                and self.base == other.base
                and self.exponent == other.exponent)

    def __repr__(self):
        return f"Power(base={self.base}, exponent={self.exponent})"


# -----------------------------
# Tokenizer
# -----------------------------

def translator(problem):
    """Convert a raw operation string into a token list.

    Literal runs become Literal tokens; '^', '(' and ')' are kept as strings.
    Whitespace only separates tokens.
    """
    full_problem = []
    b = 0

    while b < len(problem):
        current_char = problem[b]

        # --- Numbers: digits, decimal points and signs ---
        if current_char in LITERAL_CHARS:
            str_number = current_char
            while (b + 1 < len(problem)) and problem[b + 1] in LITERAL_CHARS:
                b += 1
                str_number += problem[b]
            full_problem.append(Literal(str_number))

        # --- Operator and parentheses ---
        elif current_char in Operations or current_char in "()":
            full_problem.append(current_char)

        # --- Whitespace (ignored) ---
        elif current_char in WHITESPACE:
            pass

        else:
            raise E.MalformedExpression(E.message_for("1001", repr(current_char)), code="1001", equation=problem)

        b = b + 1

    return full_problem


# -----------------------------
# Parser (recursive descent)
# -----------------------------

def is_operand_start(token):
    return isinstance(token, Literal) or token == "("


def parse(problem):
    """Parse an operation string into a Power tree.

    Raises MalformedExpression or MissingOperand; never returns a bare Literal.
    """
    if not problem.strip():
        raise E.MalformedExpression(E.message_for("1004"), code="1004", equation=problem)

    tokens = translator(problem)

    if "^" not in tokens:
        raise E.MalformedExpression(E.message_for("1000"), code="1000", equation=problem)

    def parse_operand(tokens):
        """Literals and sub-expressions in '()'. Returns None for an empty slot."""
        if not tokens or not is_operand_start(tokens[0]):
            return None

        token = tokens.pop(0)
        if isinstance(token, Literal):
            return token

        # Parenthesized sub-expression
        inner = parse_expression(tokens)
        if not tokens or tokens.pop(0) != ")":
            raise E.MalformedExpression(E.message_for("1002"), code="1002", equation=problem)
        if isinstance(inner, Power):
            inner.grouped = True
        return inner

    def parse_expression(tokens):
        """operand ( '^' expression )? with missing-operand detection around '^'."""
        base = parse_operand(tokens)
        if not tokens or tokens[0] != "^":
            return base

        tokens.pop(0)
        exponent = parse_expression(tokens)

        if base is None and exponent is None:
            raise E.MissingOperand("both", equation=problem)
        elif base is None:
            raise E.MissingOperand("base", equation=problem)
        elif exponent is None:
            raise E.MissingOperand("exponent", equation=problem)

        return Power(base, exponent)

    finaler_baum = parse_expression(tokens)

    if tokens:
        rest = tokens[0]
        if rest == ")":
            raise E.MalformedExpression(E.message_for("1001", "')'"), code="1001", equation=problem)
        shown = rest.text if isinstance(rest, Literal) else rest
        raise E.MalformedExpression(E.message_for("1003", repr(shown)), code="1003", equation=problem)

    if not isinstance(finaler_baum, Power):
        raise E.MalformedExpression(E.message_for("1000"), code="1000", equation=problem)

    logger.debug("Parsed %r into %r", problem, finaler_baum)
    return finaler_baum
