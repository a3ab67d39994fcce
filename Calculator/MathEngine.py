# MathEngine.py
"""""
Core calculation engine for the calculator.

Pipeline
--------
1) Tokenizer: converts the raw input string into a validated tuple of tokens.
2) Bracket resolution: every '(...)' group is evaluated through the full
   pipeline and replaced by its value.
3) Precedence reduction: '^', then '*' '/', then '+' '-'. Each pass resolves
   the leftmost remaining operator of its level first, which gives left to
   right associativity within a level.
4) Formatter: rounds to the configured number of decimal places.

Every stage returns a new tuple. Errors travel as values (MathError
instances) and stop the pipeline at the stage that produced them; only
calculate() raises.
"""""

import math
import logging
from dataclasses import dataclass
from typing import Optional

from . import config_manager as config_manager
from . import Tokenizer
from . import error as E
from .ArithmeticEngine import arithmetic
from .Tokenizer import OPERATORS, isNumber

logger = logging.getLogger(__name__)

PRECEDENCE_LEVELS = (
    (OPERATORS["exponent"],),
    (OPERATORS["multiplication"], OPERATORS["division"]),
    (OPERATORS["addition"], OPERATORS["subtraction"]),
)


# -----------------------------
# Precedence reduction
# -----------------------------

def collapse(equation, operators):
    """Resolve every occurrence of the given operator(s), leftmost first.

    operators is a single operator or a tuple of operators sharing one
    precedence level. One left to right pass: each operator is applied to
    the value already reduced on its left and the operand on its right.
    Returns the reduced tuple or the first error value.
    """
    if isinstance(operators, str):
        operators = (operators,)
    if not any(token in operators for token in equation):
        return equation

    reduced = []
    b = 0
    while b < len(equation):
        token = equation[b]
        if token not in operators:
            reduced.append(token)
            b += 1
            continue

        if not reduced or b + 1 >= len(equation):
            return E.MalformedExpression(f"Operator '{token}' is missing an operand.", code="3012")

        slice_ = (reduced[-1], token, equation[b + 1])
        result = arithmetic(slice_)
        if E.is_error(result):
            return result

        logger.debug("collapse %s -> %r", slice_, result)
        reduced[-1] = result
        b += 2

    return tuple(reduced)


# -----------------------------
# Bracket resolution
# -----------------------------

def collapse_brackets(equation):
    """Replace each bracket group by its value, innermost group first.

    Every ')' closes the innermost open group; its interior holds no
    brackets any more and goes through order_of_operations. Nesting depth
    only grows the list of open groups, never the call stack.
    """
    groups = [[]]
    for token in equation:
        if token == "(":
            groups.append([])
        elif token == ")":
            if len(groups) == 1:
                return E.MalformedExpression("Missing '('.", code="3010")
            interior = tuple(groups.pop())
            inner = order_of_operations(interior)
            if E.is_error(inner):
                return inner
            logger.debug("bracket %s -> %r", interior, inner)
            groups[-1].append(inner)
        else:
            groups[-1].append(token)

    if len(groups) > 1:
        return E.MalformedExpression("Missing ')'.", code="3009")
    return tuple(groups[0])


def order_of_operations(equation):
    """Evaluate a token tuple: brackets, then '^', then '* /', then '+ -'.

    Returns a float or an error value.
    """
    if "(" in equation or ")" in equation:
        equation = collapse_brackets(equation)
        if E.is_error(equation):
            return equation

    for operators in PRECEDENCE_LEVELS:
        if any(token in operators for token in equation):
            equation = collapse(equation, operators)
            if E.is_error(equation):
                return equation

    if len(equation) != 1 or not isNumber(equation[0]):
        return E.MalformedExpression(f"Invalid equation: {equation!r}", code="3012")
    return equation[0]


# -----------------------------
# Result formatting
# -----------------------------

# Largest useful precision of a float result
MAX_DECIMAL_PLACES = 15


def cleanup(ergebnis, decimal_places=2):
    """Round half away from zero to decimal_places and render the shortest form.

    Integral values have no fractional part ("5", not "5.0"), trailing zeros
    are dropped ("7.5", not "7.50"). decimal_places is clamped to
    0..MAX_DECIMAL_PLACES.
    """
    decimal_places = min(max(0, int(decimal_places)), MAX_DECIMAL_PLACES)
    factor = 10 ** decimal_places
    scaled = ergebnis * factor

    # Beyond 2**53 every float is integral and the rounding is a no-op
    if abs(scaled) < 2 ** 53:
        whole = math.floor(abs(scaled))
        if abs(scaled) - whole >= 0.5:
            whole += 1
        ergebnis = math.copysign(whole, scaled) / factor

    if ergebnis == 0:
        return "0"
    if ergebnis.is_integer() and abs(ergebnis) < 1e21:
        return str(int(ergebnis))
    return repr(ergebnis)


# -----------------------------
# Public entry points
# -----------------------------

def solve(problem, decimal_places=None, implicit_multiplication=None):
    """Evaluate problem and return the formatted result or a MathError value."""
    settings = config_manager.load_setting_value("all")
    if decimal_places is None:
        decimal_places = settings["decimal_places"]
    if implicit_multiplication is None:
        implicit_multiplication = settings["implicit_multiplication"]

    if not isinstance(problem, str):
        return E.MalformedExpression(f"Expected text, got {type(problem).__name__}.", code="3012")

    try:
        equation = Tokenizer.translator(Tokenizer.strip_whitespace(problem), implicit_multiplication)
    except E.MathError as e:
        e.equation = problem
        logger.info("Rejected %r: %s", problem, e.message)
        return e

    ergebnis = order_of_operations(equation)
    if E.is_error(ergebnis):
        ergebnis.equation = problem
        logger.info("Could not evaluate %r: %s", problem, ergebnis.message)
        return ergebnis

    ausgabe_string = cleanup(ergebnis, decimal_places)
    logger.debug("%r = %s", problem, ausgabe_string)
    return ausgabe_string


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluate(): exactly one of value / error is set."""
    value: Optional[str]
    error: Optional[E.MathError] = None
    display: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


def evaluate(expression: str) -> EvaluationResult:
    """Evaluate expression; failures come back in EvaluationResult.error."""
    ergebnis = solve(expression)
    if not E.is_error(ergebnis):
        return EvaluationResult(value=ergebnis, display=ergebnis)

    if isinstance(ergebnis, E.DivideByZero):
        display = config_manager.load_setting_value("divide_by_zero_message")
    else:
        display = ergebnis.display_text
    return EvaluationResult(value=None, error=ergebnis, display=display)


def calculate(problem):
    """Evaluate problem and return the formatted result; raises MathError."""
    ergebnis = solve(problem)
    if E.is_error(ergebnis):
        raise ergebnis
    return ergebnis
