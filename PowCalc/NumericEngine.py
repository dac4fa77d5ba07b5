# NumericEngine
"""""
Numeric domain selection and power computation.

The domain is chosen from the literal text alone, first match wins:
  1. FLOAT     if either literal contains '.'
  2. SIGNED    if either literal starts with '-'
  3. UNSIGNED  otherwise

Integers behave like 64-bit machine integers (results wrap), floats like IEEE-754 doubles
(overflow becomes inf). Overflow is never reported as an error.
"""""
import math
import logging
from enum import Enum

from . import error as E

logger = logging.getLogger(__name__)

INT_BITS = 64
UNSIGNED_MAX = 2 ** INT_BITS - 1
SIGNED_MIN = -(2 ** (INT_BITS - 1))
SIGNED_MAX = 2 ** (INT_BITS - 1) - 1
DIGITS = "0123456789"


class NumericDomain(Enum):
    FLOAT = "float"
    SIGNED = "signed"
    UNSIGNED = "unsigned"


def hasFloatingPoint(number, exponent):
    return "." in number or "." in exponent


def hasNegative(number, exponent):
    """True when either literal carries a leading minus sign."""
    return number.startswith("-") or exponent.startswith("-")


def select_domain(number, exponent):
    if hasFloatingPoint(number, exponent):
        return NumericDomain.FLOAT
    elif hasNegative(number, exponent):
        return NumericDomain.SIGNED
    else:
        return NumericDomain.UNSIGNED


# -----------------------------
# Literal conversion
# -----------------------------

def to_integer(literal, lowest, highest):
    body = literal[1:] if literal.startswith("-") else literal
    if not body or any(char not in DIGITS for char in body):
        raise E.NumberConversionError(literal, code="2000")

    value = int(literal)
    if value < lowest or value > highest:
        raise E.NumberConversionError(literal, code="2001")
    return value


def to_float(literal):
    try:
        return float(literal)
    except ValueError:
        raise E.NumberConversionError(literal, code="2000") from None


def convert(literal, domain):
    """Convert a literal to the Python number used for the given domain."""
    if domain is NumericDomain.FLOAT:
        return to_float(literal)
    elif domain is NumericDomain.SIGNED:
        return to_integer(literal, SIGNED_MIN, SIGNED_MAX)
    else:
        return to_integer(literal, 0, UNSIGNED_MAX)


# -----------------------------
# Power per domain
# -----------------------------

def wrap_signed(value):
    value &= UNSIGNED_MAX
    if value > SIGNED_MAX:
        value -= 2 ** INT_BITS
    return value


def unsigned_power(base, exponent):
    return pow(base, exponent, 2 ** INT_BITS)


def signed_power(base, exponent):
    if exponent >= 0:
        return wrap_signed(pow(base, exponent, 2 ** INT_BITS))

    # Negative exponent: the real result truncated toward zero
    if base == 0:
        raise E.CalculationError(E.message_for("2100", f"0 ^ {exponent}"), code="2100")
    elif base == 1:
        return 1
    elif base == -1:
        return 1 if exponent % 2 == 0 else -1
    return 0


def float_power(base, exponent):
    odd_exponent = exponent.is_integer() and exponent % 2 == 1
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if base < 0 and odd_exponent else math.inf
    except ValueError:
        # math domain error: zero to a negative power or a negative base to a fractional power
        if base == 0:
            return math.copysign(math.inf, base) if odd_exponent else math.inf
        return math.nan


def compute_power(domain, base, exponent):
    if domain is NumericDomain.FLOAT:
        return float_power(base, exponent)
    elif domain is NumericDomain.SIGNED:
        return signed_power(base, exponent)
    else:
        return unsigned_power(base, exponent)


def getResultString(number, exponent):
    """Compute number ^ exponent from two resolved literals and render it as text.

    The text is the domain's natural str() form, e.g. '512', '-8' or '6.25'.
    """
    domain = select_domain(number, exponent)
    base_value = convert(number, domain)
    exponent_value = convert(exponent, domain)

    result = compute_power(domain, base_value, exponent_value)
    logger.debug("%s ^ %s evaluated as %s -> %s", number, exponent, domain.value, result)
    return str(result)
