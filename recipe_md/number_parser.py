"""
Parsing of the numeric amounts which prefix ingredient units and yields, e.g.
the "1 1/2" in "1 1/2 cups".

The grammar is deliberately permissive. The following forms are accepted:

* Integers (``2``)
* Decimals (``1.5``) including a comma as the decimal separator (``1,5``)
* Fractions (``1/2``)
* Vulgar fractions (``½``)
* Mixed numbers, i.e. any two of the above, either separated by whitespace
  (``1 1/2``, ``1 ½``) or adjacent (``1½``). The two values are summed.

.. autofunction:: parse_amount

.. autoclass:: AmountMatch

.. autofunction:: number
"""

from typing import Mapping, NamedTuple, Optional, Tuple, Union

import math

from fractions import Fraction


__all__ = [
    "Number",
    "VULGAR_FRACTIONS",
    "AmountMatch",
    "parse_amount",
    "number",
]


Number = Union[int, float, Fraction]

DIGITS = "0123456789"

VULGAR_FRACTIONS: Mapping[str, Fraction] = {
    "½": Fraction(1, 2),
    "⅓": Fraction(1, 3),
    "⅔": Fraction(2, 3),
    "¼": Fraction(1, 4),
    "¾": Fraction(3, 4),
    "⅕": Fraction(1, 5),
    "⅖": Fraction(2, 5),
    "⅗": Fraction(3, 5),
    "⅘": Fraction(4, 5),
    "⅙": Fraction(1, 6),
    "⅚": Fraction(5, 6),
    "⅛": Fraction(1, 8),
    "⅜": Fraction(3, 8),
    "⅝": Fraction(5, 8),
    "⅞": Fraction(7, 8),
}
"""The single-character Unicode fractions understood by the grammar."""


class AmountMatch(NamedTuple):
    """The result of :py:func:`parse_amount`."""

    value: float
    """The decimal value of the amount."""

    raw_text: str
    """The exact text the value was parsed from, e.g. "1 1/2" or "1½"."""

    remainder: str
    """The (whitespace stripped) text following the amount, e.g. a unit."""

    number: Number
    """
    The exact value: an int for plain integers, a float when a decimal was
    involved, otherwise a :py:class:`~fractions.Fraction`.
    """


def is_finite(value: Number) -> bool:
    """True if the value can be represented as a (finite) float."""
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def starts_with_term(text: str) -> bool:
    return text[:1] != "" and (text[0] in DIGITS or text[0] in VULGAR_FRACTIONS)


def parse_term(text: str) -> Optional[Tuple[Number, str, str]]:
    """
    Parse a single numeric term from the start of ``text``. Returns the value,
    the text consumed and the (unstripped) text which follows, or None if no
    term is present.
    """
    if text[:1] in VULGAR_FRACTIONS:
        return VULGAR_FRACTIONS[text[0]], text[0], text[1:]
    if text[:1] == "" or text[0] not in DIGITS:
        return None

    # A run of digits with at most one separator: '.' and ',' are decimal
    # points, '/' separates a numerator and denominator.
    separator: Optional[str] = None
    end = 0
    while end < len(text):
        char = text[end]
        if char in DIGITS:
            pass
        elif char in ".,/" and separator is None:
            separator = char
        else:
            break
        end += 1

    raw = text[:end]
    rest = text[end:]

    # Terms too long to convert from a string, or too large to represent as a
    # float, are treated like a zero denominator: not a number.
    try:
        value: Number
        if separator == "/":
            numerator, _, denominator = raw.partition("/")
            if not denominator or int(denominator) == 0:
                return None
            value = Fraction(int(numerator), int(denominator))
        elif separator is not None:
            value = float(raw.replace(",", "."))
        else:
            value = int(raw)
    except ValueError:
        return None

    if not is_finite(value):
        return None
    return value, raw, rest


def parse_amount(text: str) -> Optional[AmountMatch]:
    """
    Parse an amount from the start of the supplied string.

    Returns None if the (whitespace stripped) string does not start with a
    number. At most two terms are combined into a mixed number; anything
    following is returned as the remainder, for example::

        >>> parse_amount("1 1/2 cups")
        AmountMatch(value=1.5, raw_text='1 1/2', remainder='cups', number=Fraction(3, 2))
    """
    text = text.strip()

    first = parse_term(text)
    if first is None:
        return None
    value, raw_text, rest = first

    if starts_with_term(rest.lstrip()):
        second = parse_term(rest.lstrip())
        if second is not None and is_finite(value + second[0]):
            joiner = " " if rest[:1].isspace() else ""
            value = value + second[0]
            raw_text = raw_text + joiner + second[1]
            rest = second[2]

    return AmountMatch(float(value), raw_text, rest.strip(), value)


def number(value: str) -> Number:
    """
    Parse a string consisting of exactly one amount (e.g. "3", "1,5", "9 3/4"
    or "1½"). Throws a :py:exc:`ValueError` if this fails.
    """
    match = parse_amount(value)
    if match is None or match.remainder:
        raise ValueError(f"Not a valid amount: {value!r}")
    return match.number
