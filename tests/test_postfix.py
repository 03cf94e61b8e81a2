import pytest

from dsdrills.postfix import MAX_DEPTH, PostfixError, evaluate_postfix


def test_worked_example():
    assert evaluate_postfix("53+82-*") == 48


def test_prompt_example():
    assert evaluate_postfix("23+5*") == 25


def test_single_digit():
    assert evaluate_postfix("7") == 7


def test_division_truncates():
    assert evaluate_postfix("72/") == 3


def test_negative_division_truncates_toward_zero():
    assert evaluate_postfix("07-3/") == -2


def test_stops_at_closing_paren():
    assert evaluate_postfix("53+)9*") == evaluate_postfix("53+")


def test_other_characters_ignored():
    assert evaluate_postfix("5 3 +") == evaluate_postfix("53+")


def test_operand_order_for_subtraction():
    assert evaluate_postfix("82-") == -evaluate_postfix("28-")


def test_top_value_returned_when_extra_operands():
    assert evaluate_postfix("12") == 2


def test_underflow_raises():
    with pytest.raises(PostfixError):
        evaluate_postfix("5+")


def test_empty_expression_raises():
    with pytest.raises(PostfixError):
        evaluate_postfix("")


def test_division_by_zero_raises():
    with pytest.raises(PostfixError):
        evaluate_postfix("50/")


def test_overflow_raises():
    with pytest.raises(PostfixError):
        evaluate_postfix("1" * (MAX_DEPTH + 1))


def test_error_is_value_error():
    with pytest.raises(ValueError):
        evaluate_postfix("*")