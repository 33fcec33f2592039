import pytest

from errors import DivisionByZero
from evaluator import evaluate
from expression import Number, Operator, OperatorKind

ADD = Operator(OperatorKind.ADD)
SUB = Operator(OperatorKind.SUBTRACT)
MUL = Operator(OperatorKind.MULTIPLY)
DIV = Operator(OperatorKind.DIVIDE)


def n(value):
    return Number(float(value))


def test_single_number():
    assert evaluate([n(5)]) == 5


def test_left_to_right_without_precedence():
    assert evaluate([n(2), ADD, n(3), MUL, n(4)]) == 20


def test_longer_chain():
    assert evaluate([n(10), SUB, n(4), DIV, n(3), MUL, n(5), ADD, n(1)]) == 11


def test_divide_by_zero_fails():
    with pytest.raises(DivisionByZero):
        evaluate([n(4), DIV, n(0)])


def test_divide_by_zero_aborts_the_rest_of_the_fold():
    with pytest.raises(DivisionByZero):
        evaluate([n(4), DIV, n(0), ADD, n(1)])


def test_empty_expression_evaluates_to_zero():
    assert evaluate([]) == 0


def test_leading_operator_evaluates_to_zero():
    assert evaluate([ADD, n(5)]) == 0


def test_leading_operator_is_not_checked_for_division_by_zero():
    assert evaluate([DIV, n(0)]) == 0


def test_trailing_operator_is_ignored():
    assert evaluate([n(3), ADD, n(4), MUL]) == 7


def test_fold_stops_at_first_malformed_pair():
    assert evaluate([n(3), ADD, n(4), n(9), MUL, n(2)]) == 7
    assert evaluate([n(3), ADD, ADD, n(4)]) == 3


def test_malformed_tail_hides_later_division_by_zero():
    assert evaluate([n(6), DIV, n(2), ADD, ADD, DIV, n(0)]) == 3


def test_trailing_number_after_complete_pairs_is_not_consumed():
    assert evaluate([n(1), ADD, n(2), n(9)]) == 3


def test_evaluate_is_repeatable():
    expression = (n(8), DIV, n(2), SUB, n(1))
    assert evaluate(expression) == evaluate(expression) == 3
    assert expression == (n(8), DIV, n(2), SUB, n(1))


def test_accepts_any_sequence():
    assert evaluate(iter([n(1), ADD, n(1)])) == 2
