"""Command-line argument validation for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = " \n\t\v\f\r"
_SIGNS = "+-"
_DIGITS = "0123456789"

ERR_INVALID_ARGS = "Error: Invalid arguments."
USAGE = "Usage: philo number_of_philo die_in_ms eat_in_ms sleep_in_ms"


class ArgumentError(ValueError):
    """Raised when the command-line arguments are unusable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; durations are in milliseconds."""

    philo_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat_count: int | None = None


def is_valid_number(text: str) -> bool:
    """Tell whether *text* is optional whitespace, at most two signs, then digits."""
    rest = text.lstrip(_WHITESPACE)
    unsigned = rest.lstrip(_SIGNS)
    if len(rest) - len(unsigned) > 2:
        return False
    return all(char in _DIGITS for char in unsigned)


def parse_number(text: str) -> int:
    """Read a leading integer from *text*, returning -1 when it leaves the int range.

    Leading whitespace and one sign are accepted; reading stops at the first
    character that is not a digit.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+") and rest:
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if char not in _DIGITS:
            break
        result = result * 10 + int(char)
        if not INT_MIN <= result * sign <= INT_MAX:
            return -1
    return result * sign


def parse_arguments(args: Sequence[str]) -> Settings:
    """Validate the arguments that follow the program name and build settings.

    Four or five positive integers are expected: the number of philosophers,
    the time to die, to eat and to sleep, and optionally how many meals each
    philosopher must eat.
    """
    if not 4 <= len(args) <= 5:
        raise ArgumentError(USAGE)
    values = []
    for text in args:
        if not is_valid_number(text):
            raise ArgumentError(ERR_INVALID_ARGS)
        value = parse_number(text)
        if value <= 0 or value > INT_MAX:
            raise ArgumentError(ERR_INVALID_ARGS)
        values.append(value)
    philo_count, time_to_die, time_to_eat, time_to_sleep, *extra = values
    return Settings(
        philo_count=philo_count,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        must_eat_count=extra[0] if extra else None,
    )