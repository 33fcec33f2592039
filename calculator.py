"""
Calculator Engine for ChainCalc
Button-level session: accumulates the display, builds the token expression
and evaluates it on "="
"""
import logging

import config
from errors import DivisionByZero, StoreError
from evaluator import evaluate
from expression import Number, Operator, OperatorKind, append_token
from formatting import format_number, parse_number
from history_manager import Calculation

logger = logging.getLogger(__name__)


class Calculator:
    def __init__(self, history=None, separator=None):
        self.history = history
        self.separator = separator or config.DECIMAL_SEPARATOR
        self.expression = ()
        self.display = "0"
        self.last_result = None
        self.last_warning = None

    def press_digit(self, digit):
        """Add a digit or decimal separator to the display"""
        digit = str(digit)
        if digit == ".":
            digit = self.separator
        if self.display == config.ERROR_TEXT:
            self.reset_display()

        if digit == self.separator and self.separator in self.display:
            return self.display

        if self.display == "0" and digit != self.separator:
            self.display = digit
        else:
            self.display += digit
        return self.display

    def press_operator(self, operator):
        """Push the displayed number and the operator onto the expression"""
        if self.display == config.ERROR_TEXT:
            self.reset_display()

        kind = operator if isinstance(operator, OperatorKind) else OperatorKind.from_symbol(operator)
        if kind is None:
            return self.display
        try:
            number = parse_number(self.display, self.separator)
        except ValueError:
            return self.display

        self.expression = append_token(self.expression, Number(number))
        self.expression = append_token(self.expression, Operator(kind))
        self.reset_display()
        return self.display

    def reset_display(self):
        self.display = "0"

    def clear(self):
        """Discard the expression and reset the display"""
        self.expression = ()
        self.reset_display()
        return self.display

    def calculate(self):
        """Evaluate the expression with the displayed number as the last operand"""
        try:
            number = parse_number(self.display, self.separator)
        except ValueError:
            return self.display

        expression = append_token(self.expression, Number(number))
        self.expression = ()
        self.last_warning = None
        try:
            result = evaluate(expression)
        except DivisionByZero:
            logger.info("Division by zero, expression discarded")
            self.display = config.ERROR_TEXT
            self.last_result = None
            return self.display

        self.last_result = result
        self.display = format_number(result, self.separator)

        if self.history is not None:
            try:
                self.history.append(Calculation.create(expression, result))
            except StoreError as e:
                logger.warning("Result not saved to history: %s", e)
                self.last_warning = str(e)

        return self.display

    def get_display(self):
        return self.display
