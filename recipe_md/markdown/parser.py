"""
Entry points for parsing RecipeMD documents.

.. autofunction:: parse

.. autofunction:: parse_with_diagnostics

.. autoclass:: ParseResult
    :members:

.. autofunction:: check
"""

from typing import List, Optional, Tuple

import logging

from dataclasses import dataclass

from recipe_md.recipe import Recipe

from recipe_md.exceptions import (
    RecipeMDError,
    InvalidAmountError,
    MalformedStructureError,
)

from recipe_md.lint import Lint, AMOUNT_LINT_KINDS

from recipe_md.markdown.common import normalise_newlines, parse_markdown

from recipe_md.markdown.segment import segment

from recipe_md.markdown.metadata import parse_metadata

from recipe_md.markdown.ingredients import parse_ingredient_groups


__all__ = [
    "parse",
    "ParseResult",
    "parse_with_diagnostics",
    "check",
]


logger = logging.getLogger(__name__)


def parse_with_lint(markdown_source: str, lints: List[Lint]) -> Recipe:
    markdown_source = normalise_newlines(markdown_source)
    document = parse_markdown(markdown_source)

    segments = segment(document.children, markdown_source)
    metadata = parse_metadata(segments.metadata, lints)
    ingredient_groups = parse_ingredient_groups(segments.ingredients, lints)

    return Recipe(
        title=segments.title,
        description=metadata.description,
        tags=metadata.tags,
        yield_=metadata.yield_,
        ingredient_groups=tuple(ingredient_groups),
        instructions=segments.instructions_source,
    )


def raise_for_invalid_amounts(lints: List[Lint]) -> None:
    """Throw an InvalidAmountError for the first amount or yield lint, if any."""
    for lint in lints:
        if lint.kind in AMOUNT_LINT_KINDS:
            raise InvalidAmountError(lint.text)


def parse(markdown_source: str, strict: bool = False) -> Recipe:
    """
    Parse a RecipeMD document.

    Ingredients, amounts and yields which cannot be understood are ignored
    unless ``strict`` is True, in which case an amount or yield not starting
    with a number causes an :py:exc:`~recipe_md.exceptions.InvalidAmountError`
    to be thrown.

    Raises
    ======
    recipe_md.exceptions.MissingTitleError
    recipe_md.exceptions.MissingIngredientSectionError
    recipe_md.exceptions.InvalidAmountError
        Only in strict mode.
    """
    lints: List[Lint] = []
    recipe = parse_with_lint(markdown_source, lints)
    if strict:
        raise_for_invalid_amounts(lints)
    return recipe


@dataclass(frozen=True)
class ParseResult:
    """The outcome of :py:func:`parse_with_diagnostics`."""

    recipe: Optional[Recipe] = None
    """The parsed recipe, or None if parsing failed."""

    error: Optional[RecipeMDError] = None
    """The reason parsing failed, or None if it succeeded."""

    lints: Tuple[Lint, ...] = ()
    """Descriptions of content which was ignored during parsing."""

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_with_diagnostics(markdown_source: str, strict: bool = False) -> ParseResult:
    """
    Parse a RecipeMD document, returning a :py:class:`ParseResult` rather
    than throwing an exception on failure.

    Unexpected failures are reported as a
    :py:exc:`~recipe_md.exceptions.MalformedStructureError`.
    """
    lints: List[Lint] = []
    try:
        recipe = parse_with_lint(markdown_source, lints)
        if strict:
            raise_for_invalid_amounts(lints)
    except RecipeMDError as e:
        return ParseResult(error=e, lints=tuple(lints))
    except Exception as e:
        logger.exception("Unexpected failure parsing recipe")
        return ParseResult(error=MalformedStructureError(str(e)), lints=tuple(lints))
    return ParseResult(recipe=recipe, lints=tuple(lints))


def check(markdown_source: str) -> List[Lint]:
    """
    Check a RecipeMD document for content the parser would ignore, returning
    a (possibly empty) list of :py:class:`~recipe_md.lint.Lint`.

    Raises
    ======
    recipe_md.exceptions.RecipeMDError
        If the document cannot be parsed at all.
    """
    lints: List[Lint] = []
    parse_with_lint(markdown_source, lints)
    return lints
