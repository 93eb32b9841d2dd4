"""
Parsing of the metadata section of a RecipeMD document (between the title
and the first divider): the description, tags and yield.

Tags are given as an emphasised comma separated list, and the yield as a
strongly emphasised comma separated list of amounts, each in a paragraph of
their own (though they may share a paragraph with each other)::

    A delicious Mexican dip.

    *vegan, Mexican*
    **4 servings, 200 g**

Every other paragraph forms part of the description.

.. autofunction:: parse_metadata
"""

from typing import List, NamedTuple, Optional, Tuple

import logging

from marko import block, inline  # type: ignore

from recipe_md.recipe import Amount, Yield

from recipe_md.lint import Lint, LintKind

from recipe_md.markdown.inline import extract_text, find_metadata_runs


__all__ = [
    "Metadata",
    "split_list",
    "parse_tags",
    "parse_yield_amounts",
    "parse_metadata",
]


logger = logging.getLogger(__name__)


class Metadata(NamedTuple):
    description: Optional[str]
    tags: Tuple[str, ...]
    yield_: Yield


def split_list(text: str) -> List[str]:
    """Split a comma separated list, dropping empty entries."""
    return [entry.strip() for entry in text.split(",") if entry.strip()]


def parse_tags(emphasis: inline.Emphasis) -> Tuple[str, ...]:
    return tuple(split_list(extract_text(emphasis.children)))


def parse_yield_amounts(
    strong: inline.StrongEmphasis, lints: List[Lint]
) -> Tuple[Amount, ...]:
    """
    Parse the amounts listed in a yield. Entries not starting with a number
    are dropped (and reported in ``lints``).
    """
    amounts = []
    for entry in split_list(extract_text(strong.children)):
        amount = Amount.parse(entry)
        if amount is None:
            logger.debug("Ignoring yield without a number: %r", entry)
            lints.append(
                Lint(
                    kind=LintKind.yield_not_a_number,
                    description=f"Yield '{entry}' does not start with a number.",
                    text=entry,
                )
            )
        else:
            amounts.append(amount)
    return tuple(amounts)


def parse_metadata(
    blocks: List[block.BlockElement], lints: Optional[List[Lint]] = None
) -> Metadata:
    """
    Parse the blocks of the metadata section.

    When tags (or a yield) are given more than once, the last declaration is
    used. Blocks other than paragraphs are ignored.

    Content which is ignored is reported by appending a
    :py:class:`~recipe_md.lint.Lint` to ``lints``, if given.
    """
    if lints is None:
        lints = []

    description_paragraphs: List[str] = []
    tags: Tuple[str, ...] = ()
    amounts: Tuple[Amount, ...] = ()

    for element in blocks:
        if not isinstance(element, block.Paragraph):
            continue

        # Paragraphs with emphasis which yields no tags or amounts are
        # treated as prose, along with any lint they produced.
        runs = find_metadata_runs(element.children)
        paragraph_lints: List[Lint] = []
        found_tags: Tuple[str, ...] = ()
        found_amounts: Tuple[Amount, ...] = ()
        if runs is not None and runs.emphasis is not None:
            found_tags = parse_tags(runs.emphasis)
        if runs is not None and runs.strong is not None:
            found_amounts = parse_yield_amounts(runs.strong, paragraph_lints)

        if found_tags or found_amounts:
            lints.extend(paragraph_lints)
            if found_tags:
                if tags:
                    logger.debug("Tags %r replaced by %r", tags, found_tags)
                    lints.append(
                        Lint(
                            kind=LintKind.duplicate_metadata,
                            description=(
                                f"Tags were given more than once; "
                                f"'{', '.join(tags)}' was ignored."
                            ),
                            text=", ".join(tags),
                        )
                    )
                tags = found_tags
            if found_amounts:
                if amounts:
                    replaced = ", ".join(amount.formatted for amount in amounts)
                    logger.debug("Yield %r replaced", replaced)
                    lints.append(
                        Lint(
                            kind=LintKind.duplicate_metadata,
                            description=(
                                f"A yield was given more than once; "
                                f"'{replaced}' was ignored."
                            ),
                            text=replaced,
                        )
                    )
                amounts = found_amounts
            continue

        text = extract_text(element.children).strip()
        if text:
            description_paragraphs.append(text)

    return Metadata(
        description="\n\n".join(description_paragraphs) or None,
        tags=tags,
        yield_=Yield(amounts),
    )
