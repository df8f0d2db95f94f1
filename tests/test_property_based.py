"""Property-based tests for the parser and container."""

from hypothesis import given
from hypothesis import strategies as st

from utilkit import (
    INVALID_ARGUMENT,
    NOT_ALL_CHARACTERS_USED,
    OUT_OF_RANGE,
    Container,
    get_error,
    get_value,
    parse_number,
)

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


@given(INT32, st.sampled_from(["", "+"]))
def test_in_range_integers_parse(value, plus):
    text = f"{plus}{value}" if value >= 0 else str(value)
    result = parse_number(text)
    assert get_error(result) == ""
    assert get_value(result) == value


@given(st.integers().filter(lambda v: not -(2**31) <= v < 2**31))
def test_out_of_range_integers_fail(value):
    assert get_error(parse_number(str(value))) == OUT_OF_RANGE


@given(INT32, st.text(min_size=1).filter(lambda s: not s[0].isascii() or not s[0].isdigit()))
def test_trailing_garbage_fails(value, suffix):
    assert get_error(parse_number(f"{value}{suffix}")) == NOT_ALL_CHARACTERS_USED


@given(st.text(alphabet=st.characters(blacklist_characters="+-0123456789 \t\n\v\f\r")))
def test_no_digits_or_sign_is_invalid(text):
    assert get_error(parse_number(text)) == INVALID_ARGUMENT


@given(st.text())
def test_parse_never_raises_and_keeps_invariant(text):
    result = parse_number(text)
    assert result.is_ok() != result.is_err()
    if result.is_err():
        assert result.value == 0


@given(st.lists(st.integers(min_value=-5, max_value=5)), st.integers(min_value=-6, max_value=6))
def test_contains_matches_first_index(values, probe):
    c = Container[int]()
    for v in values:
        c.add(v)

    found, index = c.contains(probe)
    if probe in values:
        assert found
        assert index == values.index(probe)
    else:
        assert (found, index) == (False, 0)
    assert list(c) == values


@given(st.integers(min_value=4300, max_value=6000), INT32)
def test_zero_padding_never_raises(zeros, value):
    sign = "-" if value < 0 else ""
    assert get_value(parse_number(f"{sign}{'0' * zeros}{abs(value)}")) == value
