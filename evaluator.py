"""
Expression Evaluator for ChainCalc
Reduces a token expression to a single number, strictly left to right
"""
import logging

from expression import Number, Operator, apply

logger = logging.getLogger(__name__)


def evaluate(expression):
    """
    Fold `expression` left to right and return the result.

    Operators are applied as soon as their right operand is known, so there
    is no precedence: 2 + 3 x 4 gives 20. DivisionByZero aborts the fold.
    Malformed input is not an error: an empty expression or one that does
    not start with a number evaluates to 0, and the fold stops quietly at
    the first pair that is not (Operator, Number).
    """
    expression = tuple(expression)

    # Intentional leniency: structural problems fall back to 0, not an error
    if not expression or not isinstance(expression[0], Number):
        logger.debug("Expression has no leading number, evaluating to 0")
        return 0.0

    current_result = expression[0].value

    for index in range(1, len(expression) - 1, 2):
        operator = expression[index]
        operand = expression[index + 1]
        if not isinstance(operator, Operator) or not isinstance(operand, Number):
            # Intentional leniency: keep what was folded so far
            logger.debug("Stopped folding at token %d: %r, %r", index, operator, operand)
            break
        current_result = apply(operator.kind, current_result, operand.value)

    return current_result
