"""Conversion of integers to Roman numerals."""

from __future__ import annotations

from collections.abc import Iterator

# (one, five) symbols for units, tens, hundreds and thousands.
_PLACES = (("I", "V"), ("X", "L"), ("C", "D"), ("M", "_"))


def digits(value: int) -> Iterator[int]:
    """Yield the decimal digits of a positive value, least significant first.

    Zero and negative values yield nothing.
    """
    if value <= 0:
        return
    while True:
        value, digit = divmod(value, 10)
        yield digit
        if value == 0:
            return


def int_to_roman(num: int) -> str:
    """Write a number as a Roman numeral.

    Values from 1 to 3999 give the usual numerals. Thousands digits from 4 to 8
    use "_" for the missing five-thousand symbol. A thousands digit of 9, or a
    value of 10000 or more, raises ValueError.
    """
    places = list(enumerate(digits(num)))
    if len(places) > len(_PLACES):
        raise ValueError(f"{num} has too many digits for a Roman numeral")

    parts: list[str] = []
    for place, digit in reversed(places):
        one, five = _PLACES[place]
        if digit == 9:
            if place + 1 >= len(_PLACES):
                raise ValueError(f"{num} cannot be written as a Roman numeral")
            parts.append(one + _PLACES[place + 1][0])
        elif digit >= 5:
            parts.append(five + one * (digit - 5))
        elif digit == 4:
            parts.append(one + five)
        else:
            parts.append(one * digit)
    return "".join(parts)