import pytest

from typing import Union

from fractions import Fraction

from recipe_md.number_formatting import (
    format_float,
    format_fraction,
    format_number,
    to_unicode_fractions,
)


@pytest.mark.parametrize(
    "number, significant_figures, exp_str",
    [
        # Integer values
        (0, 3, "0"),
        (1, 3, "1"),
        (-1, 3, "-1"),
        (12345, 3, "12345"),
        # Fractions less than 1
        (0.12345, 3, "0.123"),
        # Rounds correctly
        (0.98765, 3, "0.988"),
        # Drops trailing zeros
        (0.10045, 3, "0.1"),
        (1.5, 3, "1.5"),
        # Drops decimal if no decimal digits
        (0.00045, 3, "0"),
        # Digits before the decimal reduce number of digits after
        (1.2345, 3, "1.23"),
        (12.345, 3, "12.3"),
        (123.45, 3, "123"),
        # Correct rounding when decimal digits are dropped
        (0.9999, 3, "1"),
        (-123.9999, 3, "-124"),
        # No significant figures results in rounding to int
        (9.876, 0, "10"),
    ],
)
def test_format_float(number: float, significant_figures: int, exp_str: str) -> None:
    assert format_float(number, significant_figures) == exp_str


@pytest.mark.parametrize(
    "number, exp_str",
    [
        # Integer values
        (0, "0"),
        (3, "3"),
        (Fraction(10, 1), "10"),
        (Fraction(10, -1), "-10"),
        # Simple fractions
        (Fraction(1, 2), "1/2"),
        (Fraction(7, 8), "7/8"),
        (Fraction(-3, 5), "-3/5"),
        # Improper fractions
        (Fraction(3, 2), "1 1/2"),
        (Fraction(9, 4), "2 1/4"),
        (Fraction(-4, 3), "-1 1/3"),
        # Denominators with no Unicode fraction are shown as decimals
        (Fraction(1, 20), "0.05"),
        (Fraction(-1, 20), "-0.05"),
        (Fraction(1, 12), "0.083"),
        (Fraction(10, 7), "1.43"),
    ],
)
def test_format_fraction(number: Union[int, Fraction], exp_str: str) -> None:
    assert format_fraction(number) == exp_str


@pytest.mark.parametrize(
    "number, exp_str",
    [
        # Integers
        (123, "123"),
        # Floats
        (1.23, "1.23"),
        (2.0, "2"),
        # Fractions
        (Fraction(3, 5), "3/5"),
        (Fraction(6, 2), "3"),
    ],
)
def test_format_number(number: Union[int, float, Fraction], exp_str: str) -> None:
    assert format_number(number) == exp_str


@pytest.mark.parametrize(
    "text, exp_text",
    [
        # Nothing to replace
        ("", ""),
        ("2", "2"),
        ("1.5", "1.5"),
        ("1,5 kg", "1,5 kg"),
        # Simple fractions
        ("1/2", "½"),
        ("3/4 cup", "¾ cup"),
        ("7/8", "⅞"),
        # Mixed numbers are joined up
        ("1 1/2", "1½"),
        ("2 2/3 cups", "2⅔ cups"),
        ("1 ½", "1½"),
        # Several fractions
        ("1 1/2, 3/4", "1½, ¾"),
        # Trailing punctuation
        ("1/2.", "½."),
        ("(1/2)", "(½)"),
        # Only whole fractions are replaced
        ("11/2", "11/2"),
        ("1/25", "1/25"),
        ("1.1/2", "1.1/2"),
        ("1,1/2", "1,1/2"),
        ("1/2,5", "1/2,5"),
        ("1/2.5", "1/2.5"),
        # Fractions without a Unicode character
        ("1/7", "1/7"),
        ("2/4", "2/4"),
    ],
)
def test_to_unicode_fractions(text: str, exp_text: str) -> None:
    assert to_unicode_fractions(text) == exp_text
