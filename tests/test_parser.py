import pytest

from philosophers.parser import ArgumentError, parse_number, validate_arguments


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("+7", 7),
        ("   13", 13),
        ("\t\n\x0b\x0c\r 5", 5),
        ("007", 7),
        ("0", 0),
    ],
)
def test_parse_number_accepts_valid_input(text, expected):
    assert parse_number(text) == expected


def test_parse_number_accepts_int_max():
    assert parse_number("2147483647") == 2**31 - 1


@pytest.mark.parametrize(
    "text",
    ["", "+", "   ", "-1", "12a", "1 ", "++3", "1.5", "2147483648", "99999999999"],
)
def test_parse_number_rejects_invalid_input(text):
    with pytest.raises(ArgumentError):
        parse_number(text)


def test_parse_number_rejects_non_ascii_digits():
    with pytest.raises(ArgumentError):
        parse_number("\u0663")


def test_validate_arguments_returns_integers():
    assert validate_arguments(["5", "800", "200", "200"]) == [5, 800, 200, 200]


def test_validate_arguments_with_meal_count():
    assert validate_arguments(["5", "800", "200", "200", "7"]) == [5, 800, 200, 200, 7]


@pytest.mark.parametrize(
    "args",
    [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]],
)
def test_validate_arguments_rejects_wrong_count(args):
    with pytest.raises(ArgumentError, match="expected 4 or 5 arguments"):
        validate_arguments(args)


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["5", "800", "200", "-200"],
        ["5", "800", "abc", "200"],
        ["5", "800", "200", "200", "0"],
        ["5", "2147483648", "200", "200"],
    ],
)
def test_validate_arguments_rejects_bad_values(args):
    with pytest.raises(ArgumentError, match="invalid argument value"):
        validate_arguments(args)


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        validate_arguments(["x"])