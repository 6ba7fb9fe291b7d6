import pytest

from pushswap.parsing import (
    BLANK_ARGUMENT_STATUS,
    INT_MAX,
    INT_MIN,
    LONG_MAX,
    LONG_MIN,
    ErrorCode,
    InputError,
    error_message,
    is_numeric,
    load_values,
    parse_long,
    split_arguments,
    validate_tokens,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -17", -17),
        ("\t\n+5abc", 5),
        ("--5", 0),
        ("", 0),
        ("99999999999999999999", LONG_MAX),
        ("-99999999999999999999", LONG_MIN),
        ("9223372036854775807", LONG_MAX),
    ],
)
def test_parse_long(text, expected):
    assert parse_long(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123", True),
        ("-+12", True),
        ("-", True),
        ("", False),
        (None, False),
        ("12a", False),
        ("1 ", False),
        (" 1", False),
    ],
)
def test_is_numeric(text, expected):
    assert is_numeric(text) is expected


def test_split_single_argument():
    assert split_arguments(["  3   2 1 "]) == ["3", "2", "1"]


def test_split_several_arguments_kept():
    assert split_arguments(["3 2", "1"]) == ["3 2", "1"]


def test_split_only_on_spaces():
    assert split_arguments(["3\t4"]) == ["3\t4"]


def test_split_no_arguments():
    assert split_arguments([]) == []


@pytest.mark.parametrize("blank", ["", "    "])
def test_split_blank_argument_rejected(blank):
    with pytest.raises(InputError) as info:
        split_arguments([blank])
    assert info.value.status == BLANK_ARGUMENT_STATUS
    assert info.value.message == "Error\n"


def test_validate_returns_values_at_bounds():
    tokens = [str(INT_MIN), str(INT_MAX), "+7"]
    assert validate_tokens(tokens) == [INT_MIN, INT_MAX, 7]


def test_validate_rejects_non_numeric():
    with pytest.raises(InputError) as info:
        validate_tokens(["1", "x"])
    assert info.value.code is ErrorCode.NUMERIC_ERROR
    assert info.value.status == int(ErrorCode.NUMERIC_ERROR)


@pytest.mark.parametrize("token", [str(INT_MAX + 1), str(INT_MIN - 1)])
def test_validate_rejects_out_of_range(token):
    with pytest.raises(InputError) as info:
        validate_tokens([token])
    assert info.value.code is ErrorCode.OUT_OF_RANGE


def test_validate_allows_duplicates():
    assert validate_tokens(["4", "4"]) == [4, 4]


def test_load_values_keeps_order():
    tokens = ["5", "-3", "10"]
    assert load_values(tokens) == [int(t) for t in tokens]


def test_load_values_rejects_duplicates():
    with pytest.raises(InputError) as info:
        load_values(["1", "2", "1"])
    assert info.value.code is ErrorCode.DUPLICATED_VALUES


def test_load_values_signs_only_read_as_zero():
    with pytest.raises(InputError) as info:
        load_values(["--5", "0"])
    assert info.value.code is ErrorCode.DUPLICATED_VALUES


def test_numeric_checked_before_duplicates():
    with pytest.raises(InputError) as info:
        load_values(["1", "1", "z"])
    assert info.value.code is ErrorCode.NUMERIC_ERROR


@pytest.mark.parametrize(
    "code, expected",
    [
        (ErrorCode.SUCCESS, ""),
        (ErrorCode.NUMERIC_ERROR, "Error\n"),
        (ErrorCode.DUPLICATED_VALUES, "Error\n"),
        (ErrorCode.MALLOC_ERROR, "Error: malloc error"),
        (ErrorCode.SET_SENTINEL_ERROR, "Error: set_sentinel"),
        (ErrorCode.SORTED, ""),
    ],
)
def test_error_message(code, expected):
    assert error_message(code) == expected


def test_error_message_accepts_plain_int():
    assert error_message(15) == error_message(ErrorCode.MALLOC_ERROR)


def test_error_message_unknown_code():
    with pytest.raises(ValueError):
        error_message(99)


def test_input_error_message_matches_table():
    with pytest.raises(InputError) as info:
        load_values(["a"])
    assert info.value.message == error_message(ErrorCode.NUMERIC_ERROR)