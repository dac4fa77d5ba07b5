

class PowError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

    def __str__(self):
        if self.equation is None:
            return self.message
        return f"{self.message} in '{self.equation}'"


class MalformedExpression(PowError):
    pass


class MissingOperand(PowError):
    codes = {"base": "1100", "exponent": "1101", "both": "1102"}

    def __init__(self, missing, equation=None):
        code = self.codes[missing]
        super().__init__(message_for(code), code=code, equation=equation)
        self.missing = missing


class NumberConversionError(PowError):
    def __init__(self, literal, code="2000", equation=None):
        super().__init__(message_for(code, f"'{literal}'"), code=code, equation=equation)
        self.literal = literal


class CalculationError(PowError):
    pass








Error_Dictionary = {

    "1" : "Syntax Error",
    "2" : "Calculation Error",
    "9" : "Runtime Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "1000" : "Unrecognized operation syntax",
    "1001" : "Unexpected token: ", # + Token
    "1002" : "Missing ')'",
    "1003" : "Unexpected trailing input: ", # + rest of the expression
    "1004" : "Empty operation",

    "1100" : "Missing operand",
    "1101" : "Missing exponent",
    "1102" : "Missing operand and exponent",

    "2000" : "Invalid number: ", # + literal
    "2001" : "Number out of range: ", # + literal
    "2100" : "Division by zero: ", # + operation


    "9999" : "Unexpected error: " #+error
}


def message_for(code, detail=""):
    """Build an error message from the message table plus an optional detail."""
    return ERROR_MESSAGES.get(code, ERROR_MESSAGES["9999"]) + detail


def describe(error):
    """Return the single line shown to the user for a failed operation.

    Example: ``Error 1101 (Syntax Error): Missing exponent in '5^'``
    """
    category = Error_Dictionary.get(error.code[:1], "Unknown Error")
    return f"Error {error.code} ({category}): {error}"
