# PowEngine.py
"""""
Core calculation engine for the pow calculator.

Pipeline
--------
1) ExpressionParser: builds a Literal / Power tree for one operation.
2) Resolver: evaluates nested operands depth-first, turning each into (display, literal).
3) NumericEngine: picks the numeric domain for the flat literal pair and computes the power.
4) Renderer: assembles the display line.

calculate() handles one operation and raises PowError subclasses.
calculate_all() handles a comma separated batch and reports every operation as an
EvaluationOutcome, so callers decide what to do with failures.
"""""

import logging
from typing import NamedTuple, Optional, Union

from rich.text import Text

from . import error as E
from . import ExpressionParser
from . import NumericEngine
from . import Renderer
from .config_manager import Settings

logger = logging.getLogger(__name__)


class ResolvedOperand(NamedTuple):
    display: Union[str, Text]
    literal: str
    nested: bool = False


class EvaluationResult(NamedTuple):
    display: Text
    result: str

    @property
    def display_string(self):
        return self.display.plain


class EvaluationOutcome(NamedTuple):
    expression: str
    result: Optional[EvaluationResult] = None
    error: Optional[E.PowError] = None

    @property
    def ok(self):
        return self.error is None


# -----------------------------
# Resolver
# -----------------------------

def resolve_operand(node, settings):
    """Reduce one operand node to a ResolvedOperand.

    A literal is used as-is; a nested Power is evaluated recursively and shown as its own equation.
    """
    if isinstance(node, ExpressionParser.Literal):
        return ResolvedOperand(node.text, node.text)

    nested = evaluate_tree(node, settings)
    return ResolvedOperand(nested.display, nested.result, nested=True)


def evaluate_tree(tree, settings):
    number = resolve_operand(tree.base, settings)
    exponent = resolve_operand(tree.exponent, settings)

    result = NumericEngine.getResultString(number.literal, exponent.literal)
    display = Renderer.render_equation(number, exponent, result, settings)
    return EvaluationResult(display, result)


# -----------------------------
# Public entry points
# -----------------------------

def calculate(problem, settings=None):
    """Main API: parse → resolve → compute → render for a single operation."""
    if settings is None:
        settings = Settings()
    problem = problem.strip()

    try:
        finaler_baum = ExpressionParser.parse(problem)
        return evaluate_tree(finaler_baum, settings)

    # Re-raise our domain errors after attaching the source equation
    except E.PowError as e:
        if e.equation is None:
            e.equation = problem
        raise e
    except RecursionError:
        raise E.PowError(message=E.message_for("9999", "operation is nested too deeply"),
                         code="9999", equation=problem) from None
    # Convert unexpected Python exceptions to our unified error type
    except Exception as e:
        raise E.PowError(message=E.message_for("9999", str(e)), code="9999", equation=problem) from e


def split_operations(raw_input):
    """Split the joined command line text into single operations on ','."""
    return raw_input.split(",")


def calculate_all(operations, settings=None):
    """Evaluate operations in order and return one EvaluationOutcome per operation.

    Without settings.keep_going, evaluation stops after the first failing operation.
    """
    if settings is None:
        settings = Settings()
    if isinstance(operations, str):
        operations = split_operations(operations)

    outcomes = []
    for problem in operations:
        try:
            outcomes.append(EvaluationOutcome(problem, result=calculate(problem, settings)))
        except E.PowError as e:
            logger.debug("Operation %r failed with code %s", problem, e.code)
            outcomes.append(EvaluationOutcome(problem, error=e))
            if not settings.keep_going:
                break

    return outcomes
