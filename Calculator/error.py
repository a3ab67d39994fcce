


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

    @property
    def area(self):
        return Error_Dictionary.get(str(self.code)[:1], "Unknown")

    @property
    def display_text(self):
        """Text a caller shows in place of a result."""
        return f"Error {self.code}: {ERROR_MESSAGES.get(self.code, 'Unknown error')}"

    def __repr__(self):
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

class MalformedExpression(MathError):
    pass

class CalculationError(MathError):
    pass

class DivideByZero(CalculationError):
    def __init__(self, message="Division by zero", code="3003", equation=None):
        super().__init__(message, code=code, equation=equation)


def is_error(value):
    """True when a pipeline stage handed back an error instead of a value."""
    return isinstance(value, MathError)





Error_Dictionary= {

    # Leading digit of a code -> area
    "3" : "Calculator Error",
    "9" : "Runtime Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "3003" : "Division by Zero",
    "3008" : "More than one '.' in one number.",
    "3009" : "Missing ')'. ",
    "3010" : "Missing '('. ",
    "3011" : "Unexpected Token: ", # + Token
    "3012" : "Invalid equation:  ", # + Equation
    "3026" : "Number too big.",
    "3027" : "Missing Number.",
    "3028" : "Missing Number before operator.",
    "3029" : "Missing Number after operator.",
    "3031" : "Empty expression.",
    "3032" : "Invalid character: ", # + character
    "3033" : "Result is not a real number.",




    "9999" : "Unexpected Error: " #+error
}
