"""Reading the command line into a list of integers for stack A."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Sequence

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)
INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

BLANK_ARGUMENT_STATUS = 55
"""Exit status used when the only argument holds nothing but spaces."""

_WHITESPACE = "\t\n\v\f\r "


class ErrorCode(IntEnum):
    """Status codes reported by the sorting program."""

    SUCCESS = 0
    SET_SENTINEL_ERROR = 1
    ARGUMENTS_INVALID = 2
    NUMERIC_ERROR = 3
    ITOA_ERROR = 4
    OUT_OF_RANGE = 5
    DUPLICATED_VALUES = 6
    LOAD_ERROR = 7
    STACK_A_INIT_ERROR = 8
    STACK_B_INIT_ERROR = 9
    PROCESS_STATUS_INIT_ERROR = 10
    PROCESS_STATUS_DESTROY_ERROR = 11
    PROCESS_STATUS_STATE_ERROR = 12
    PROCESS_STATUS_OP_ERROR = 13
    PROCESS_STATUS_OP_LIST_ERROR = 14
    MALLOC_ERROR = 15
    UNEXPECTED_ERROR = 16
    SORTED = 17


_MESSAGES = {
    ErrorCode.SUCCESS: "",
    ErrorCode.SET_SENTINEL_ERROR: "Error: set_sentinel",
    ErrorCode.ARGUMENTS_INVALID: "Error\n",
    ErrorCode.NUMERIC_ERROR: "Error\n",
    ErrorCode.ITOA_ERROR: "Error\n",
    ErrorCode.OUT_OF_RANGE: "Error\n",
    ErrorCode.DUPLICATED_VALUES: "Error\n",
    ErrorCode.LOAD_ERROR: "Error: load error",
    ErrorCode.STACK_A_INIT_ERROR: "",
    ErrorCode.STACK_B_INIT_ERROR: "------------------",
    ErrorCode.PROCESS_STATUS_INIT_ERROR: "Error: process status init error",
    ErrorCode.PROCESS_STATUS_DESTROY_ERROR: "Error: process status destroy error",
    ErrorCode.PROCESS_STATUS_STATE_ERROR: "Error: process status state error",
    ErrorCode.PROCESS_STATUS_OP_ERROR: "Error: process status op error",
    ErrorCode.PROCESS_STATUS_OP_LIST_ERROR: "Error: process status op list error",
    ErrorCode.MALLOC_ERROR: "Error: malloc error",
    ErrorCode.UNEXPECTED_ERROR: "",
    ErrorCode.SORTED: "",
}


def error_message(code: int) -> str:
    """Return the text written to standard error for a status code."""
    return _MESSAGES[ErrorCode(code)]


class InputError(ValueError):
    """Raised when the command-line arguments cannot be loaded."""

    def __init__(self, code: ErrorCode, status: int | None = None) -> None:
        super().__init__(error_message(code).strip() or code.name)
        self.code = code
        self.status = int(code) if status is None else status

    @property
    def message(self) -> str:
        """The text to write to standard error."""
        if self.status == BLANK_ARGUMENT_STATUS:
            return "Error\n"
        return error_message(self.code)


def parse_long(text: str) -> int:
    """Read a leading signed decimal number, clamped to the 64-bit range.

    Leading whitespace is skipped, one sign is accepted, and reading stops
    at the first non-digit; a string with no digits reads as 0.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = rest.startswith("-")
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    value = 0
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digit = ord(char) - ord("0")
        if value > LONG_MAX // 10 or (value == LONG_MAX // 10 and digit > LONG_MAX % 10):
            return LONG_MIN if negative else LONG_MAX
        value = value * 10 + digit
    return -value if negative else value


def is_numeric(text: str | None) -> bool:
    """True for a non-empty string of signs followed only by digits."""
    if not text:
        return False
    body = text.lstrip("+-")
    return all("0" <= char <= "9" for char in body)


def split_arguments(argv: Sequence[str]) -> list[str]:
    """Turn the arguments after the program name into number tokens.

    A single argument is split on spaces; several arguments are taken as
    they are. A single argument holding only spaces is rejected.
    """
    args = list(argv)
    if len(args) != 1:
        return args
    only = args[0]
    if not only.lstrip(" "):
        raise InputError(ErrorCode.ARGUMENTS_INVALID, BLANK_ARGUMENT_STATUS)
    return [token for token in only.split(" ") if token]


def validate_tokens(tokens: Iterable[str]) -> list[int]:
    """Check each token is a number within the int range and return the values."""
    values = []
    for token in tokens:
        if not is_numeric(token):
            raise InputError(ErrorCode.NUMERIC_ERROR)
        number = parse_long(token)
        if not INT_MIN <= number <= INT_MAX:
            raise InputError(ErrorCode.OUT_OF_RANGE)
        values.append(number)
    return values


def load_values(tokens: Iterable[str]) -> list[int]:
    """Validate the tokens and reject repeated values; return them in order."""
    values = validate_tokens(tokens)
    if len(set(values)) != len(values):
        raise InputError(ErrorCode.DUPLICATED_VALUES)
    return values