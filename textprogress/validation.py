"""Argument checking for progress indicator options."""
from typing import Any, Callable, Dict

from .constants import DEFAULT_OPTIONS


class InvalidArgument(ValueError):
    """Raised when an argument or option has an invalid value or name."""


def is_positive_int(value: Any) -> bool:
    """Return True for integers greater than zero (bools excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def is_char_symbol(value: Any) -> bool:
    """Return True for a string of exactly one character."""
    return isinstance(value, str) and len(value) == 1


def is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def is_str(value: Any) -> bool:
    return isinstance(value, str)


# option name -> (predicate, description of the constraint)
OPTION_VALIDATORS: Dict[str, tuple] = {
    'bar_length': (is_positive_int, 'a positive integer'),
    'update_step': (is_positive_int, 'a positive integer'),
    'start_message': (is_str, 'a string'),
    'end_message': (is_str, 'a string'),
    'show_bar': (is_bool, 'a boolean'),
    'show_percentage': (is_bool, 'a boolean'),
    'show_actual_num': (is_bool, 'a boolean'),
    'show_remaining_time': (is_bool, 'a boolean'),
    'show_final_time': (is_bool, 'a boolean'),
    'bar_symbol': (is_char_symbol, 'a single character'),
    'empty_bar_symbol': (is_char_symbol, 'a single character'),
}


def check(name: str, value: Any, predicate: Callable[[Any], bool], expected: str) -> Any:
    """Return value unchanged or raise InvalidArgument naming the argument."""
    if not predicate(value):
        raise InvalidArgument(f"Invalid value for '{name}': expected {expected}, got {value!r}")
    return value


def validate_total(total: Any) -> int:
    return check('total', total, is_positive_int, 'a positive integer')


def validate_options(options: Dict[str, Any]) -> Dict[str, Any]:
    """Validate display options and fill in defaults.

    Args:
        options: Keyword options supplied by the caller

    Returns:
        Dictionary holding every option, defaults applied

    Raises:
        InvalidArgument: If an option is unknown or has an invalid value
    """
    settings = dict(DEFAULT_OPTIONS)
    for name, value in options.items():
        if name not in OPTION_VALIDATORS:
            raise InvalidArgument(f"Unknown option '{name}'")
        predicate, expected = OPTION_VALIDATORS[name]
        settings[name] = check(name, value, predicate, expected)
    return settings
