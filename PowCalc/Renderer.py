# Renderer.py
"""""
Builds the display line for one evaluated operation.

    [(]base[)] ^ [(]exponent[)] = result

Brackets are only drawn around operands that were themselves operations. Colors are applied
as rich styles, so the plain text of the line never depends on them. In quiet mode the line is
just the result.
"""""
from enum import Enum

from rich.text import Text


class COLOR(Enum):
    NUMBER = "number"
    EXPONENT = "exponent"
    RESULT = "result"
    CARET = "caret"
    EQUALS = "equals"
    BRACKET = "bracket"


palette = {
    COLOR.NUMBER: "yellow",
    COLOR.EXPONENT: "yellow",
    COLOR.RESULT: "green",
    COLOR.CARET: "white",
    COLOR.EQUALS: "white",
    COLOR.BRACKET: "dark_orange",
}


def append_operand(line, operand, role):
    """Append one ResolvedOperand, bracketed when it was a nested operation."""
    if not operand.nested:
        line.append(operand.display, style=palette[role])
        return

    # The role color sits under the nested equation's own styles
    nested = Text(style=palette[role])
    nested.append(operand.display)

    line.append("(", style=palette[COLOR.BRACKET])
    line.append(nested)
    line.append(")", style=palette[COLOR.BRACKET])


def render_equation(number, exponent, result, settings):
    """Return the display line as rich Text.

    number / exponent are ResolvedOperand values, result is the result literal.
    """
    line = Text()

    if not settings.quiet:
        append_operand(line, number, COLOR.NUMBER)
        line.append(" ")
        line.append("^", style=palette[COLOR.CARET])
        line.append(" ")
        append_operand(line, exponent, COLOR.EXPONENT)
        line.append(" ")
        line.append("=", style=palette[COLOR.EQUALS])
        line.append(" ")

    line.append(result, style=palette[COLOR.RESULT])
    return line
