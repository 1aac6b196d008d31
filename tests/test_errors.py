import pytest

from drillings.errors import (
    CreationError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    generate_nametag_text,
    parse_pos_nonzero,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as info:
        generate_nametag_text("")
    assert str(info.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "cannot parse integer from empty string"),
        (" 3", "invalid digit found in string"),
        ("1_0", "invalid digit found in string"),
        ("-", "invalid digit found in string"),
        ("2147483648", "number too large to fit in target type"),
        ("-2147483649", "number too small to fit in target type"),
    ],
)
def test_total_cost_rejects_what_a_strict_parse_rejects(text, message):
    with pytest.raises(ValueError) as info:
        total_cost(text)
    assert str(info.value) == message


def test_total_cost_accepts_signs():
    assert total_cost("+2") == 11
    assert total_cost("-2") == -9


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(CreationError) as negative:
        PositiveNonzeroInteger(-10)
    assert negative.value == CreationError(CreationError.NEGATIVE)
    with pytest.raises(CreationError) as zero:
        PositiveNonzeroInteger(0)
    assert zero.value == CreationError(CreationError.ZERO)


def test_creation_error_messages():
    assert str(CreationError(CreationError.NEGATIVE)) == "number is negative"
    assert str(CreationError(CreationError.ZERO)) == "number is zero"


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert not info.value.is_creation
    assert str(info.value.cause) == "invalid digit found in string"


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert info.value.cause == CreationError(CreationError.NEGATIVE)


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert info.value.cause == CreationError(CreationError.ZERO)


def test_positive():
    expected = PositiveNonzeroInteger(42)
    assert parse_pos_nonzero("42") == expected