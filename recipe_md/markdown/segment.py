"""
Division of a RecipeMD document into its sections::

    # Title                 <- title

    Description, tags and   <- metadata
    yield.

    ---

    Ingredients.            <- ingredients

    ---

    Instructions.           <- instructions

.. autofunction:: segment
"""

from typing import List, NamedTuple, Optional, Sequence

import logging

from marko import block  # type: ignore

from recipe_md.exceptions import MissingTitleError, MissingIngredientSectionError

from recipe_md.markdown.common import heading_level, end_of_line, strip_blank_lines

from recipe_md.markdown.inline import extract_text


__all__ = [
    "Segments",
    "segment",
]


logger = logging.getLogger(__name__)


class Segments(NamedTuple):
    """The sections of a RecipeMD document."""

    title: str
    """The text of the title heading."""

    metadata: List[block.BlockElement]
    """The blocks between the title and the first divider."""

    ingredients: List[block.BlockElement]
    """
    The blocks between the first and second divider (or the end of the
    document when there is only one divider).
    """

    instructions: Optional[List[block.BlockElement]]
    """
    The blocks following the second divider, or None if there is no second
    divider. Any further dividers are included as ordinary content.
    """

    instructions_source: Optional[str]
    """
    The Markdown source following the line containing the second divider,
    without leading blank lines or trailing whitespace. None if there is no
    second divider or nothing follows it.
    """


def segment(blocks: Sequence[block.BlockElement], markdown_source: str) -> Segments:
    """
    Split the top-level blocks of a document into its sections.

    The title is the first level-1 heading. Only the first and second thematic
    breaks following the title are treated as dividers.

    Parameters
    ==========
    blocks
        The top-level blocks of a document parsed by
        :py:func:`recipe_md.markdown.common.parse_markdown`.
    markdown_source
        The Markdown source the blocks were parsed from.

    Raises
    ======
    MissingTitleError
        If there is no level-1 heading.
    MissingIngredientSectionError
        If no divider follows the title.
    """
    title_index = next(
        (index for index, element in enumerate(blocks) if heading_level(element) == 1),
        None,
    )
    if title_index is None:
        raise MissingTitleError()
    title = extract_text(blocks[title_index].children).strip()

    divider_indices = [
        index
        for index in range(title_index + 1, len(blocks))
        if isinstance(blocks[index], block.ThematicBreak)
    ][:2]
    if not divider_indices:
        raise MissingIngredientSectionError()

    first_divider = divider_indices[0]
    metadata = list(blocks[title_index + 1 : first_divider])

    instructions: Optional[List[block.BlockElement]] = None
    instructions_source: Optional[str] = None
    if len(divider_indices) == 2:
        second_divider = divider_indices[1]
        ingredients = list(blocks[first_divider + 1 : second_divider])
        instructions = list(blocks[second_divider + 1 :])
        start = end_of_line(markdown_source, blocks[second_divider].pos)
        instructions_source = strip_blank_lines(markdown_source[start:]) or None
    else:
        ingredients = list(blocks[first_divider + 1 :])

    logger.debug(
        "Recipe %r: %d metadata, %d ingredient and %s instruction blocks",
        title,
        len(metadata),
        len(ingredients),
        len(instructions) if instructions is not None else "no",
    )

    return Segments(title, metadata, ingredients, instructions, instructions_source)
