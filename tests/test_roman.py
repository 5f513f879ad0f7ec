import itertools

import pytest

from leetkit.roman import digits, int_to_roman

_SYMBOLS = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def _decode(numeral):
    total = 0
    values = [_SYMBOLS[c] for c in numeral]
    for current, following in itertools.zip_longest(values, values[1:], fillvalue=0):
        total += -current if current < following else current
    return total


def test_pinned_examples():
    assert int_to_roman(3) == "III"
    assert int_to_roman(58) == "LVIII"
    assert int_to_roman(1994) == "MCMXCIV"


def test_round_trip_over_full_range():
    for n in range(1, 4000):
        assert _decode(int_to_roman(n)) == n


def test_no_symbol_repeats_more_than_three_times():
    for n in range(1, 4000):
        runs = [len(list(group)) for _, group in itertools.groupby(int_to_roman(n))]
        assert max(runs) <= 3


def test_numerals_are_distinct():
    numerals = {int_to_roman(n) for n in range(1, 4000)}
    assert len(numerals) == 3999


def test_digits_rebuild_value():
    for n in (1, 7, 10, 305, 1234, 9000, 120034):
        rebuilt = int("".join(str(d) for d in reversed(list(digits(n)))))
        assert rebuilt == n


def test_digits_of_non_positive_values_are_empty():
    assert list(digits(0)) == []
    assert list(digits(-42)) == []
    assert int_to_roman(0) == ""


def test_thousands_above_three_use_placeholder():
    assert "_" in int_to_roman(4000)
    assert "_" in int_to_roman(5000)


@pytest.mark.parametrize("num", [9000, 9999, 10000, 123456])
def test_unrepresentable_values_raise(num):
    with pytest.raises(ValueError):
        int_to_roman(num)