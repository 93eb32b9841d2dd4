r"""
The :py:mod:`recipe_md.recipe` module defines the data structure a RecipeMD
document is parsed into (and generated from).


Overview
========

A :py:class:`Recipe` has a title, an optional description, a list of tags, a
:py:class:`Yield` (e.g. "4 servings, 500 g"), a series of
:py:class:`IngredientGroup`\ s and optional free-form instructions.

Each :py:class:`IngredientGroup` has an optional title and contains a list of
:py:class:`Ingredient`\ s. Groups may contain further nested groups, though
the parser never produces these (every heading in a document starts a new
top-level group); they may be constructed by hand and will be rendered using
successively deeper headings.

Each :py:class:`Ingredient` has a name, an optional :py:class:`Amount` and,
optionally, a link to (for example) the recipe for that ingredient.

An :py:class:`Amount` records both the decimal value and the exact text it
was written as (e.g. "1 1/2" or "1½") so that the user's notation survives a
parse/generate round trip.

All structures are immutable: use :py:func:`dataclasses.replace` to derive
modified copies.


Data structures
===============

.. autoclass:: Recipe
    :members:

.. autoclass:: Yield
    :members:

.. autoclass:: IngredientGroup
    :members:

.. autoclass:: Ingredient
    :members:

.. autoclass:: Amount
    :members:

"""

from typing import Optional, Iterable, Tuple

from dataclasses import dataclass, field, replace

from recipe_md.exceptions import InvalidAmountError

from recipe_md.number_parser import Number, parse_amount, number

from recipe_md.number_formatting import format_number


__all__ = [
    "Amount",
    "Ingredient",
    "IngredientGroup",
    "Yield",
    "Recipe",
]


@dataclass(frozen=True)
class Amount:
    """
    A numeric amount with an optional unit.

    Suggested rendering::

        a.raw_text + (" " + a.unit if a.unit is not None else "")

    The :py:attr:`value` must be the value of :py:attr:`raw_text` when parsed
    by :py:func:`recipe_md.number_parser.parse_amount`.  Use
    :py:meth:`from_text` or :py:meth:`from_number` to construct amounts where
    this is guaranteed.
    """

    value: float
    """The decimal value of the amount."""

    raw_text: str
    """The amount exactly as written, e.g. "1/2", "1 1/2", "½" or "1,5"."""

    unit: Optional[str] = None
    """
    The unit of measurement, e.g. "cups". When None, the amount is unitless
    (e.g. a count, as in 3 eggs).
    """

    @classmethod
    def parse(cls, text: str) -> Optional["Amount"]:
        """
        Parse an amount and unit (e.g. "1 1/2 cups"), returning None if the
        text does not begin with a number.
        """
        match = parse_amount(text)
        if match is None:
            return None
        return cls(match.value, match.raw_text, match.remainder or None)

    @classmethod
    def from_text(cls, text: str, unit: Optional[str] = None) -> "Amount":
        """
        Parse an amount from its textual form, e.g. "1 1/2 cups".

        If ``unit`` is not given, any text following the number is used as
        the unit. Throws :py:exc:`~recipe_md.exceptions.InvalidAmountError`
        if the text does not begin with a number (or if both a unit and
        trailing text are given).
        """
        match = parse_amount(text)
        if match is None or (unit is not None and match.remainder):
            raise InvalidAmountError(text)
        if unit is None:
            unit = match.remainder or None
        return cls(match.value, match.raw_text, unit)

    @classmethod
    def from_number(cls, number: Number, unit: Optional[str] = None) -> "Amount":
        """
        Create an amount from a number, e.g. ``Amount.from_number(Fraction(3,
        2), "cups")`` is written "1 1/2 cups".

        Floats are rounded to three significant figures. Throws
        :py:exc:`~recipe_md.exceptions.InvalidAmountError` for negative
        numbers which cannot be written as amounts.
        """
        return cls.from_text(format_number(number), unit)

    @property
    def formatted(self) -> str:
        """The amount and unit as text, e.g. "2 cups" or "3"."""
        if self.unit is not None:
            return f"{self.raw_text} {self.unit}"
        return self.raw_text

    @property
    def is_whole_number(self) -> bool:
        return self.value.is_integer()

    @property
    def int_value(self) -> Optional[int]:
        """The value as an integer, if it is a whole number."""
        return int(self.value) if self.is_whole_number else None

    def scale(self, factor: Number) -> "Amount":
        """
        Return this amount multiplied by the given factor.

        The scaled value is written in the same notation where possible:
        integers and fractions remain so (e.g. "1/2" scaled by 3 becomes
        "1 1/2"), decimals remain decimals, keeping a comma decimal separator
        if one was used. Unicode fractions are written as ASCII fractions.
        """
        try:
            exact: Number = number(self.raw_text)
        except ValueError:
            exact = self.value
        raw_text = format_number(exact * factor)
        if "," in self.raw_text:
            raw_text = raw_text.replace(".", ",")
        return Amount.from_text(raw_text, self.unit)


@dataclass(frozen=True)
class Ingredient:
    """A single ingredient."""

    name: str
    """The ingredient name, e.g. "flour"."""

    amount: Optional[Amount] = None
    """The amount of this ingredient, if specified."""

    link: Optional[str] = None
    """
    A link destination, for example the path of the recipe for this ingredient
    ("sauce.md").
    """

    @property
    def has_amount(self) -> bool:
        return self.amount is not None

    @property
    def is_linked(self) -> bool:
        return self.link is not None

    @property
    def formatted_amount(self) -> Optional[str]:
        """The amount and unit as text (e.g. "2 cups") or None."""
        return self.amount.formatted if self.amount is not None else None

    def scale(self, factor: Number) -> "Ingredient":
        return replace(
            self,
            amount=(self.amount.scale(factor) if self.amount is not None else None),
        )


@dataclass(frozen=True)
class IngredientGroup:
    """
    A group of ingredients, e.g. those for the 'Crust' of a pie, optionally
    with a title and nested sub-groups.
    """

    title: Optional[str] = None
    """The group title, or None for an untitled group."""

    ingredients: Tuple[Ingredient, ...] = ()

    ingredient_groups: Tuple["IngredientGroup", ...] = ()
    """Nested groups (never produced by the parser)."""

    @property
    def has_title(self) -> bool:
        return bool(self.title)

    @property
    def total_count(self) -> int:
        """The number of ingredients in this group and all nested groups."""
        return len(self.ingredients) + sum(
            group.total_count for group in self.ingredient_groups
        )

    def iter_ingredients(self) -> Iterable[Ingredient]:
        """Iterate over the ingredients in this group, then nested groups."""
        yield from self.ingredients
        for group in self.ingredient_groups:
            yield from group.iter_ingredients()

    @property
    def all_ingredients(self) -> Tuple[Ingredient, ...]:
        return tuple(self.iter_ingredients())

    def scale(self, factor: Number) -> "IngredientGroup":
        return replace(
            self,
            ingredients=tuple(i.scale(factor) for i in self.ingredients),
            ingredient_groups=tuple(g.scale(factor) for g in self.ingredient_groups),
        )


@dataclass(frozen=True)
class Yield:
    """
    How much a recipe makes, e.g. "4 servings, 500 g". An empty list of
    amounts indicates that no yield was given.
    """

    amounts: Tuple[Amount, ...] = ()

    @classmethod
    def servings(cls, count: int) -> "Yield":
        return cls((Amount.from_number(count, "Servings"),))

    @property
    def has_amounts(self) -> bool:
        return len(self.amounts) > 0

    @property
    def formatted(self) -> str:
        """The amounts as text, e.g. "4 Servings, 500 g"."""
        return ", ".join(amount.formatted for amount in self.amounts)

    def scale(self, factor: Number) -> "Yield":
        return replace(self, amounts=tuple(a.scale(factor) for a in self.amounts))


@dataclass(frozen=True)
class Recipe:
    """
    A recipe, as described by a RecipeMD document.
    """

    title: str
    """The recipe title (the level-1 heading)."""

    description: Optional[str] = None
    """
    The description, if given. Multiple paragraphs are separated by a blank
    line.
    """

    tags: Tuple[str, ...] = ()
    """Tags, in the order given (e.g. ("vegan", "quick"))."""

    yield_: Yield = field(default_factory=Yield)
    """The amount this recipe makes."""

    ingredient_groups: Tuple[IngredientGroup, ...] = ()
    """
    The ingredients, grouped. Ingredients given before the first heading of
    the ingredient section are in an untitled group.
    """

    instructions: Optional[str] = None
    """The instructions, as Markdown, if given."""

    @property
    def all_ingredients(self) -> Tuple[Ingredient, ...]:
        """All ingredients in all (including nested) groups."""
        return tuple(
            ingredient
            for group in self.ingredient_groups
            for ingredient in group.iter_ingredients()
        )

    @property
    def has_ingredients(self) -> bool:
        return any(group.total_count > 0 for group in self.ingredient_groups)

    @property
    def has_instructions(self) -> bool:
        return bool(self.instructions)

    def scale(self, factor: Number) -> "Recipe":
        """
        Return a copy of this recipe with all yield and ingredient amounts
        scaled by the given factor.
        """
        return replace(
            self,
            yield_=self.yield_.scale(factor),
            ingredient_groups=tuple(g.scale(factor) for g in self.ingredient_groups),
        )
