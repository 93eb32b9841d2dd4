"""
Parsing of the ingredients section of a RecipeMD document (between the first
and second dividers).

Ingredients are given as list items, optionally preceded by an emphasised
amount and optionally linked::

    - *2 cups* flour
    - *3* eggs
    - *1 cup* [mayo](mayo.md)
    - salt

Ingredients may be divided into groups using headings (of level 2 or
deeper)::

    ## Crust

    - *2 cups* flour

    ## Filling

    - *4* apples

Groups are never nested: every heading starts a new group, whatever its
level.

.. autofunction:: parse_ingredient_groups

.. autofunction:: parse_ingredient
"""

from typing import List, Optional

import logging

from marko import block, inline  # type: ignore

from recipe_md.recipe import Amount, Ingredient, IngredientGroup

from recipe_md.lint import Lint, LintKind

from recipe_md.markdown.common import heading_level

from recipe_md.markdown.inline import extract_text, is_whitespace


__all__ = [
    "parse_ingredient",
    "parse_ingredient_groups",
]


logger = logging.getLogger(__name__)


LINK_ELEMENTS = (inline.Link, inline.AutoLink)


def parse_ingredient(item: block.ListItem, lints: List[Lint]) -> Optional[Ingredient]:
    """
    Parse a single ingredient list item. Returns None (reporting the reason
    in ``lints``) if the item does not describe an ingredient.
    """
    blocks = [
        child for child in item.children if not isinstance(child, block.BlankLine)
    ]
    if not blocks or not isinstance(blocks[0], block.Paragraph):
        logger.debug("Ignoring ingredient list item without a paragraph")
        lints.append(
            Lint(
                kind=LintKind.ingredient_not_a_paragraph,
                description="An ingredient list item did not start with text.",
            )
        )
        return None

    elements = list(blocks[0].children)
    index = 0

    def skip_whitespace() -> None:
        nonlocal index
        while index < len(elements) and is_whitespace(elements[index]):
            index += 1

    skip_whitespace()

    amount: Optional[Amount] = None
    if index < len(elements) and isinstance(elements[index], inline.Emphasis):
        amount_text = extract_text(elements[index].children)
        amount = Amount.parse(amount_text)
        if amount is None:
            logger.debug("Ignoring ingredient amount without a number: %r", amount_text)
            lints.append(
                Lint(
                    kind=LintKind.amount_not_a_number,
                    description=(
                        f"Ingredient amount '{amount_text.strip()}' "
                        f"does not start with a number."
                    ),
                    text=amount_text.strip(),
                )
            )
        index += 1
        skip_whitespace()

    link: Optional[str] = None
    if index < len(elements) and isinstance(elements[index], LINK_ELEMENTS):
        name = extract_text(elements[index].children).strip()
        link = elements[index].dest
    else:
        rest = elements[index:]
        name = extract_text(rest).strip()
        link = next(
            (element.dest for element in rest if isinstance(element, LINK_ELEMENTS)),
            None,
        )

    if not name:
        logger.debug("Ignoring ingredient without a name")
        lints.append(
            Lint(
                kind=LintKind.ingredient_without_name,
                description=(
                    "An ingredient was given without a name"
                    + (
                        f" (amount '{amount.formatted}')."
                        if amount is not None
                        else "."
                    )
                ),
                text=amount.formatted if amount is not None else "",
            )
        )
        return None

    return Ingredient(name, amount, link)


def parse_ingredient_groups(
    blocks: List[block.BlockElement], lints: Optional[List[Lint]] = None
) -> List[IngredientGroup]:
    """
    Parse the blocks of the ingredients section into a flat list of groups.

    Ingredients before the first heading are placed in an untitled group
    (omitted if there are none). A heading with no ingredients before the
    next heading is dropped. Ordered and unordered lists are treated
    identically. Blocks other than headings and lists are ignored.

    Content which is ignored is reported by appending a
    :py:class:`~recipe_md.lint.Lint` to ``lints``, if given.
    """
    if lints is None:
        lints = []

    groups: List[IngredientGroup] = []
    title: Optional[str] = None
    ingredients: List[Ingredient] = []

    for element in blocks:
        level = heading_level(element)
        if level is not None and level >= 2:
            if ingredients:
                groups.append(IngredientGroup(title, tuple(ingredients)))
            elif title is not None:
                logger.debug("Ignoring empty ingredient group %r", title)
                lints.append(
                    Lint(
                        kind=LintKind.empty_group_title,
                        description=f"Ingredient group '{title}' has no ingredients.",
                        text=title,
                    )
                )
            title = extract_text(element.children).strip()
            ingredients = []
        elif isinstance(element, block.List):
            for item in element.children:
                ingredient = parse_ingredient(item, lints)
                if ingredient is not None:
                    ingredients.append(ingredient)

    if ingredients or title is not None:
        groups.append(IngredientGroup(title, tuple(ingredients)))

    return groups
