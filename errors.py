"""
Exception types shared across ChainCalc
"""


class CalculatorError(Exception):
    """Base class for every error ChainCalc raises"""


class EvaluationError(CalculatorError):
    """An expression could not be reduced to a result"""


class DivisionByZero(EvaluationError):
    """The right operand of a division was exactly zero"""

    def __init__(self, message="Division by zero"):
        super().__init__(message)


class StoreError(CalculatorError):
    """The calculation history could not be read or written"""
