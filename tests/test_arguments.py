import pytest

from philosim.arguments import (
    ERR_INVALID_ARGS,
    INT_MAX,
    INT_MIN,
    USAGE,
    ArgumentError,
    Settings,
    is_valid_number,
    parse_arguments,
    parse_number,
)


@pytest.mark.parametrize(
    "text",
    ["42", "  42", "\t\n\v\f\r7", "+5", "-5", "+-5", "--5", "", "   ", "-"],
)
def test_is_valid_number_accepts(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize(
    "text", ["+++5", "---1", "4a", "12 ", "1.5", "abc", "5-", " - 5"]
)
def test_is_valid_number_rejects(text):
    assert is_valid_number(text) is False


@pytest.mark.parametrize("text", ["42", "800", "1", "2147483647"])
def test_parse_number_plain(text):
    assert parse_number(text) == int(text)


def test_parse_number_signs_and_whitespace():
    assert parse_number("  +200") == 200
    assert parse_number("\t-200") == -200


def test_parse_number_stops_at_non_digit():
    assert parse_number("123abc") == 123
    assert parse_number("+-5") == 0
    assert parse_number("") == 0


def test_parse_number_limits():
    assert parse_number(str(INT_MAX)) == INT_MAX
    assert parse_number(str(INT_MIN)) == INT_MIN
    assert parse_number(str(INT_MAX + 1)) == -1
    assert parse_number(str(INT_MIN - 1)) == -1
    assert parse_number("99999999999999999999") == -1


def test_parse_arguments_four_values():
    settings = parse_arguments(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200)
    assert settings.must_eat_count is None


def test_parse_arguments_five_values():
    settings = parse_arguments(["4", "410", "200", "100", "7"])
    assert settings.philo_count == 4
    assert settings.time_to_die == 410
    assert settings.time_to_eat == 200
    assert settings.time_to_sleep == 100
    assert settings.must_eat_count == 7


def test_parse_arguments_accepts_whitespace_and_plus():
    settings = parse_arguments([" 3", "+600", "\t100", "100"])
    assert settings == Settings(3, 600, 100, 100)


@pytest.mark.parametrize(
    "args",
    [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]],
)
def test_parse_arguments_wrong_count(args):
    with pytest.raises(ArgumentError) as info:
        parse_arguments(args)
    assert str(info.value) == USAGE


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["-5", "800", "200", "200"],
        ["5", "abc", "200", "200"],
        ["5", "800", "200", "200", "0"],
        ["5", "800", "2147483648", "200"],
        ["5", "800", "", "200"],
        ["5", "800", "+-3", "200"],
        ["5", "800", "1.5", "200"],
    ],
)
def test_parse_arguments_invalid_values(args):
    with pytest.raises(ArgumentError) as info:
        parse_arguments(args)
    assert str(info.value) == ERR_INVALID_ARGS


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["x", "1", "1", "1"])