"""
Human-friendly relatively concise number formatting routines, used when
amounts are created from numbers or rescaled.

At a high-level the following function may be used:

.. autofunction:: format_number

Though this in turn is implemented by the following specialised functions

.. autofunction:: format_float

.. autofunction:: format_fraction

ASCII fractions in amount text may be swapped for their single character
Unicode equivalents using:

.. autofunction:: to_unicode_fractions
"""

import math

import re

from typing import Callable, Mapping, Union, FrozenSet

from fractions import Fraction

from recipe_md.number_parser import VULGAR_FRACTIONS


__all__ = [
    "UNICODE_FRACTIONS",
    "format_float",
    "format_fraction",
    "format_number",
    "to_unicode_fractions",
]


UNICODE_FRACTIONS: Mapping[str, str] = {
    f"{fraction.numerator}/{fraction.denominator}": char
    for char, fraction in VULGAR_FRACTIONS.items()
}
"""Mapping from ASCII fractions (e.g. "1/2") to Unicode characters (e.g. "½")."""

# A fraction not part of a larger number: "1/2," and "1/2." match, "1/2,5" and
# "1.1/2" do not.
ascii_fraction_pattern = re.compile(
    r"(?<![0-9])(?<![0-9][.,])[0-9]+/[0-9]+(?![0-9]|[.,][0-9])"
)

space_before_unicode_fraction_pattern = re.compile(
    r"(?<=[0-9]) (?=[" + "".join(VULGAR_FRACTIONS) + r"])"
)


def format_float(number: float, significant_figures: int = 3) -> str:
    """
    Format a floating point value in a concise, human-friendly way.

    This formatter will show up to ``significant_figures`` digits after the
    decimal point, with fewer digits being shown for each significant digit in
    the integer part.

    Trailing zeros after the decimal point are dropped, along with the trailing
    decimal point.

    Scientific notation is never used for large values. Significant digits
    before the decimal point are never dropped.
    """
    fractional, integer = math.modf(number)
    integer_str = f"{integer:.0f}"

    integer_digits = len(integer_str.lstrip("-0"))
    fractional_digits = max(0, significant_figures - integer_digits)
    fractional_abs = abs(fractional)
    fractional_str = f"{fractional_abs:.{fractional_digits}f}"[2:].rstrip("0")

    if len(fractional_str) == 0:
        return str(round(number))

    return f"{integer_str}.{fractional_str}"


def format_fraction(
    number: Union[int, Fraction],
    allowed_denominators: FrozenSet[int] = frozenset([2, 3, 4, 5, 6, 8]),
    format_float: Callable[[float], str] = format_float,
) -> str:
    """
    Format a :py:class:`~fractions.Fraction` in a human-friendly way.

    Improper fractions are broken down into an integer and fractional part.

    Fractions whose denominator does not appear in ``allowed_denominators`` are
    instead shown as decimal numbers. Formatting of these is deferred to
    the ``format_float`` function which defaults to :py:func:`format_float`.
    The default denominators are exactly those with a Unicode equivalent.

    Fractions are rendered as ASCII strings in the style '3/4' or, for improper
    fractions, '1 3/4'.
    """
    if isinstance(number, int):
        return str(number)
    elif number.denominator == 1:  # Integer case
        return str(number.numerator)
    elif number.denominator not in allowed_denominators:  # Decimal fallback case
        return format_float(float(number))
    elif abs(number.numerator) > number.denominator:  # Improper fraction case
        numerator = number.numerator
        denominator = number.denominator

        sign = "-" if numerator < 0 else ""
        numerator = abs(numerator)

        integer_part = numerator // denominator
        numerator %= denominator

        return f"{sign}{integer_part} {numerator}/{denominator}"
    else:  # Ordinary fraction case
        return f"{number.numerator}/{number.denominator}"


def format_number(
    number: Union[float, int, Fraction],
    format_float: Callable[[float], str] = format_float,
    format_fraction: Callable[[Fraction], str] = format_fraction,
) -> str:
    """
    Format a number in a human-friendly way.

    If a fraction is given it will be rendered as a fraction, if it is sensible
    to do so. Otherwise, the number will be represented in decimal form.

    See :py:func:`format_float` and :py:func:`format_fraction`.
    """
    if isinstance(number, float):
        return format_float(number)
    elif isinstance(number, int):
        return str(number)
    else:
        return format_fraction(number)


def to_unicode_fractions(text: str) -> str:
    """
    Replace ASCII fractions with a Unicode equivalent (e.g. "3/4" becomes "¾"),
    joining mixed numbers together (e.g. "1 1/2" becomes "1½").

    Only whole fractions are replaced: the "1/2" in "11/2" or "1/25" is left
    alone, as are fractions with no Unicode character (e.g. "1/7").
    """
    text = ascii_fraction_pattern.sub(
        lambda match: UNICODE_FRACTIONS.get(match.group(0), match.group(0)),
        text,
    )
    return space_before_unicode_fraction_pattern.sub("", text)
