# ArithmeticEngine
"""Primitive arithmetic: folds a flat chain of numbers and operators.

arithmetic() knows nothing about precedence. MathEngine.collapse only hands
it a two-operand slice ``a OP b``; longer chains are folded left to right.
Failures are returned as error values, never raised.
"""
import math
import logging
import operator

from . import error as E
from .Tokenizer import isNumber, isOp

logger = logging.getLogger(__name__)


def power(base, exponent):
    if base == 0 and exponent < 0:
        return E.DivideByZero(f"0 cannot be raised to the negative power {exponent:g}.")
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return E.CalculationError(f"{base:g}^{exponent:g} is too large.", code="3026")
    except ValueError:
        return E.CalculationError(f"{base:g}^{exponent:g} has no real result.", code="3033")


def divide(dividend, divisor):
    if divisor == 0:
        return E.DivideByZero(f"Division of {dividend:g} by zero.")
    return dividend / divisor


_OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": divide,
    "^": power,
}


def arithmetic(equation):
    """Fold ``n0 op1 n1 op2 n2 ...`` strictly left to right.

    Returns the float result, or a MathError value for division by zero,
    overflow, a power without real result, or a chain that does not
    alternate numbers and operators.
    """
    if len(equation) % 2 == 0 or not isNumber(equation[0]):
        return E.MalformedExpression(f"Invalid equation: {equation!r}", code="3012")

    result = equation[0]
    for b in range(1, len(equation), 2):
        op, operand = equation[b], equation[b + 1]
        if not isOp(op) or not isNumber(operand):
            return E.MalformedExpression(f"Invalid equation: {equation!r}", code="3012")

        result = _OPERATIONS[op](result, operand)
        if E.is_error(result):
            logger.debug("arithmetic(%r) failed: %s", equation, result.message)
            return result
        if not math.isfinite(result):
            return E.CalculationError(f"Result of {equation!r} is too large.", code="3026")

    return result
