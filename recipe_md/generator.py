"""
Generation of RecipeMD Markdown from :py:class:`~recipe_md.recipe.Recipe`
objects.

.. autofunction:: generate

.. autoclass:: GeneratorOptions
    :members:

The output is laid out as follows, with sections separated by a single blank
line and empty sections omitted::

    # Title

    Description

    *tag, tag*
    **yield, yield**

    ---

    ## Group title

    - *amount unit* ingredient
    - [linked ingredient](link)

    ---

    Instructions

Generation never fails, even for recipes the parser could not have produced
(e.g. an empty title): the recipe is written out as-is.
"""

from typing import List, Optional

from dataclasses import dataclass

from recipe_md.recipe import Amount, Ingredient, IngredientGroup, Recipe

from recipe_md.number_formatting import to_unicode_fractions


__all__ = [
    "GeneratorOptions",
    "generate",
]


MIN_GROUP_HEADING_LEVEL = 2
MAX_HEADING_LEVEL = 6


@dataclass(frozen=True)
class GeneratorOptions:
    """Options controlling the Markdown produced by :py:func:`generate`."""

    use_unicode_fractions: bool = False
    """
    If True, fractions in amounts are written using Unicode characters where
    one exists (e.g. "1 1/2" is written "1½").
    """

    ingredient_group_heading_level: int = MIN_GROUP_HEADING_LEVEL
    """
    The heading level used for ingredient group titles. Nested groups use
    successively deeper headings. Clamped to the range 2 to 6.
    """

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "ingredient_group_heading_level",
            min(
                MAX_HEADING_LEVEL,
                max(MIN_GROUP_HEADING_LEVEL, self.ingredient_group_heading_level),
            ),
        )


def format_amount(amount: Amount, options: GeneratorOptions) -> str:
    raw_text = amount.raw_text
    if options.use_unicode_fractions:
        raw_text = to_unicode_fractions(raw_text)
    if amount.unit is not None:
        return f"{raw_text} {amount.unit}"
    return raw_text


def format_ingredient(ingredient: Ingredient, options: GeneratorOptions) -> str:
    parts = []
    if ingredient.amount is not None:
        parts.append(f"*{format_amount(ingredient.amount, options)}*")
    if ingredient.link is not None:
        parts.append(f"[{ingredient.name}]({ingredient.link})")
    else:
        parts.append(ingredient.name)
    return "- " + " ".join(parts)


def format_ingredient_group(
    group: IngredientGroup, level: int, options: GeneratorOptions
) -> List[str]:
    lines = []
    if group.title is not None:
        lines.append(f"{'#' * min(MAX_HEADING_LEVEL, level)} {group.title}")
        lines.append("")

    for ingredient in group.ingredients:
        lines.append(format_ingredient(ingredient, options))
    if group.ingredients:
        lines.append("")

    for nested_group in group.ingredient_groups:
        lines.extend(format_ingredient_group(nested_group, level + 1, options))

    return lines


def generate(recipe: Recipe, options: Optional[GeneratorOptions] = None) -> str:
    """
    Produce a RecipeMD document describing the given recipe.

    Amounts are written using their :py:attr:`~recipe_md.recipe.Amount.raw_text`
    so the notation they were parsed from (or constructed with) is retained.
    """
    if options is None:
        options = GeneratorOptions()

    lines = [f"# {recipe.title}", ""]

    if recipe.description:
        lines.append(recipe.description)
        lines.append("")

    if recipe.tags:
        lines.append(f"*{', '.join(recipe.tags)}*")
    if recipe.yield_.has_amounts:
        amounts = ", ".join(
            format_amount(amount, options) for amount in recipe.yield_.amounts
        )
        lines.append(f"**{amounts}**")
    if recipe.tags or recipe.yield_.has_amounts:
        lines.append("")

    lines.append("---")
    lines.append("")

    for group in recipe.ingredient_groups:
        lines.extend(
            format_ingredient_group(
                group, options.ingredient_group_heading_level, options
            )
        )

    if recipe.instructions:
        lines.append("---")
        lines.append("")
        lines.append(recipe.instructions)

    return "\n".join(lines).strip()
