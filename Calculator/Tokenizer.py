# Tokenizer.py
"""
Tokenizer and number matcher for the calculator.

The raw input string is scanned once and turned into an immutable tuple of
tokens. Every later stage of the engine works on such tuples:

- float           numeric literal (a leading sign is folded into the value)
- "^*/+-"         binary operators
- "(" / ")"       brackets

translator() also validates the structure of the expression, so the
reduction stages in MathEngine only ever see well-formed token tuples.
"""

import re
import math
import logging
from enum import Enum

from . import error as E

logger = logging.getLogger(__name__)

OPERATORS = {
    "exponent": "^",
    "multiplication": "*",
    "division": "/",
    "addition": "+",
    "subtraction": "-",
}
Operations = tuple(OPERATORS.values())
Brackets = ("(", ")")
Signs = (OPERATORS["addition"], OPERATORS["subtraction"])

# ASCII digits only: str.isdigit() and \d both accept characters like '²'
FIND_NUMBERS_REGEX = re.compile(r"[0-9]*\.?[0-9]+")


class CharClass(Enum):
    OPERATOR = "operator"
    BRACKET = "bracket"
    DIGIT = "digit"
    DECIMAL_POINT = "decimal_point"
    WHITESPACE = "whitespace"
    OTHER = "other"


def classify(char):
    """Return the CharClass of a single character."""
    if char in Operations:
        return CharClass.OPERATOR
    if char in Brackets:
        return CharClass.BRACKET
    if char in "0123456789":
        return CharClass.DIGIT
    if char == ".":
        return CharClass.DECIMAL_POINT
    if char.isspace():
        return CharClass.WHITESPACE
    return CharClass.OTHER


def isOp(token):
    """True if token is one of the binary operators."""
    return isinstance(token, str) and token in Operations


def isNumber(token):
    return isinstance(token, float)


def strip_whitespace(expression):
    return "".join(expression.split())


def match_number(expression, start):
    """Return the longest numeric literal beginning exactly at start, or None."""
    match = FIND_NUMBERS_REGEX.match(expression, start)
    if match is None:
        return None
    return match.group(0)


def _takes_sign(tokens):
    """True if the last token is a sign belonging to the number that follows."""
    if not tokens or tokens[-1] not in Signs:
        return False
    if len(tokens) == 1:
        return True
    before = tokens[-2]
    return before == "(" or isOp(before)


def _insert_implicit_multiplication(tokens):
    """Insert '*' for number/')' followed by '(' and ')' followed by a number."""
    result = []
    for b, token in enumerate(tokens):
        if b > 0:
            previous = tokens[b - 1]
            if (isNumber(previous) or previous == ")") and token == "(":
                result.append(OPERATORS["multiplication"])
            elif previous == ")" and isNumber(token):
                result.append(OPERATORS["multiplication"])
        result.append(token)
    return result


def validate(tokens):
    """Raise MalformedExpression unless tokens form a complete infix expression."""
    if not tokens:
        raise E.MalformedExpression("Empty expression.", code="3031")

    depth = 0
    expect_operand = True
    previous = None

    for token in tokens:
        if isNumber(token):
            if not expect_operand:
                raise E.MalformedExpression(f"Unexpected Token: {token!r}", code="3011")
            expect_operand = False

        elif token == "(":
            if not expect_operand:
                raise E.MalformedExpression(f"Unexpected Token: '(' after {previous!r}", code="3011")
            depth += 1

        elif token == ")":
            if depth == 0:
                raise E.MalformedExpression("Missing '('.", code="3010")
            if previous == "(":
                raise E.MalformedExpression("Missing Number between '(' and ')'.", code="3027")
            if expect_operand:
                raise E.MalformedExpression(f"Missing Number after '{previous}'.", code="3029")
            depth -= 1

        elif expect_operand:
            # A sign that reaches this point was not followed by a number
            if token in Signs:
                raise E.MalformedExpression(f"Sign '{token}' must be followed by a number.", code="3011")
            if previous is None or previous == "(":
                raise E.MalformedExpression(f"Missing Number before '{token}'.", code="3028")
            raise E.MalformedExpression(f"Unexpected Token: '{token}' after '{previous}'", code="3011")

        else:
            expect_operand = True

        previous = token

    if expect_operand and isOp(previous):
        raise E.MalformedExpression(f"Missing Number after '{previous}'.", code="3029")
    if depth > 0:
        raise E.MalformedExpression("Missing ')'.", code="3009")


def translator(problem, implicit_multiplication=True):
    """Convert a raw input string into a validated tuple of tokens."""
    tokens = []
    b = 0

    while b < len(problem):
        current_char = problem[b]
        kind = classify(current_char)

        if kind in (CharClass.DIGIT, CharClass.DECIMAL_POINT):
            str_number = match_number(problem, b)
            if str_number is None:
                raise E.MalformedExpression(f"'.' without digits at position {b}.", code="3008")
            b += len(str_number)
            if b < len(problem) and problem[b] == ".":
                raise E.MalformedExpression(f"More than one '.' in number starting with {str_number}", code="3008")

            value = float(str_number)
            if not math.isfinite(value):
                raise E.CalculationError(f"Number too big: {str_number[:20]}...", code="3026")
            if _takes_sign(tokens):
                if tokens.pop() == OPERATORS["subtraction"]:
                    value = -value
            tokens.append(value)
            continue

        elif kind in (CharClass.OPERATOR, CharClass.BRACKET):
            tokens.append(current_char)

        elif kind == CharClass.WHITESPACE:
            pass

        else:
            raise E.MalformedExpression(f"Invalid character: '{current_char}'", code="3032")

        b += 1

    if implicit_multiplication:
        tokens = _insert_implicit_multiplication(tokens)

    validate(tokens)
    logger.debug("Tokens: %s", tokens)
    return tuple(tokens)
