"""
Plain-text extraction from :py:mod:`marko` inline elements, and
classification of paragraphs as metadata (tags and yield) or prose.

.. autofunction:: extract_text

.. autofunction:: find_metadata_runs
"""

from typing import Iterable, NamedTuple, Optional

from marko import inline  # type: ignore


__all__ = [
    "extract_text",
    "MetadataRuns",
    "find_metadata_runs",
    "is_whitespace",
]


TEXT_ELEMENTS = (inline.RawText, inline.Literal, inline.CodeSpan)
"""Inline elements whose children are a plain string."""

CONTAINER_ELEMENTS = (
    inline.Emphasis,
    inline.StrongEmphasis,
    inline.Link,
    inline.AutoLink,
)
"""Inline elements whose text is the text of their children."""


def extract_element_text(element: inline.InlineElement) -> str:
    if isinstance(element, inline.LineBreak):
        return " " if element.soft else "\n"
    elif isinstance(element, TEXT_ELEMENTS):
        return str(element.children)
    elif isinstance(element, CONTAINER_ELEMENTS):
        return extract_text(element.children)
    else:
        # Images, inline HTML, etc.
        return ""


def extract_text(elements: Iterable[inline.InlineElement]) -> str:
    """
    Flatten a series of inline elements into plain text.

    Text within emphasis, strong emphasis and links is included verbatim (the
    markup itself is dropped), soft line breaks become a space and hard line
    breaks become a newline.
    """
    return "".join(extract_element_text(element) for element in elements)


def is_whitespace(element: inline.InlineElement) -> bool:
    """True for text elements containing only whitespace."""
    return isinstance(element, inline.RawText) and not element.children.strip()


def is_plain_run(element: inline.InlineElement) -> bool:
    """True if an element contains only text and line breaks."""
    return all(
        isinstance(child, TEXT_ELEMENTS + (inline.LineBreak,))
        for child in element.children
    )


class MetadataRuns(NamedTuple):
    """The emphasis and strong runs within a metadata paragraph."""

    emphasis: Optional[inline.Emphasis]
    """The emphasised run (tags), if present."""

    strong: Optional[inline.StrongEmphasis]
    """The strongly emphasised run (yield), if present."""


def find_metadata_runs(
    elements: Iterable[inline.InlineElement],
) -> Optional[MetadataRuns]:
    """
    Determine whether a paragraph's inline elements form a metadata paragraph,
    for example::

        *vegan, quick*
        **4 servings**

    That is, a paragraph consisting of at most one emphasised run and at most
    one strongly emphasised run, separated by nothing but whitespace and line
    breaks. The runs themselves may contain only plain text.

    Returns None if the paragraph is ordinary prose.
    """
    emphasis: Optional[inline.Emphasis] = None
    strong: Optional[inline.StrongEmphasis] = None

    for element in elements:
        if isinstance(element, inline.LineBreak) or is_whitespace(element):
            continue
        elif (
            isinstance(element, inline.Emphasis)
            and emphasis is None
            and is_plain_run(element)
        ):
            emphasis = element
        elif (
            isinstance(element, inline.StrongEmphasis)
            and strong is None
            and is_plain_run(element)
        ):
            strong = element
        else:
            return None

    if emphasis is None and strong is None:
        return None
    return MetadataRuns(emphasis, strong)
