"""
Routines for parsing Markdown into the :py:mod:`marko` element tree consumed
by the RecipeMD parser.

Only top-level blocks are examined by the RecipeMD parser. Those of interest
are headings (:py:class:`marko.block.Heading` and
:py:class:`marko.block.SetextHeading`), paragraphs, lists and thematic breaks
(the ``---`` dividers). Thematic breaks are replaced with the
:py:class:`ThematicBreak` subclass below which records where in the source the
divider was found.
"""

from typing import Optional, TYPE_CHECKING

from marko import Markdown, block, helpers  # type: ignore

if TYPE_CHECKING:  # pragma: no cover
    from marko.source import Source  # type: ignore


class ThematicBreak(block.ThematicBreak):  # type: ignore
    """
    Adds a 'pos' attribute, the source offset of the start of the line
    containing the thematic break.
    """

    override = True

    pos: int

    @classmethod
    def parse(cls, source: "Source") -> "ThematicBreak":
        pos = source.pos
        element: ThematicBreak = super().parse(source)
        element.pos = pos
        return element


RecipeMDExtension = helpers.MarkoExtension(elements=[ThematicBreak])


def normalise_newlines(markdown_source: str) -> str:
    """Convert Windows and old Mac line endings into '\\n'."""
    return markdown_source.replace("\r\n", "\n").replace("\r", "\n")


def parse_markdown(markdown_source: str) -> block.Document:
    """
    Parse a (newline normalised) Markdown document into a :py:mod:`marko`
    element tree.
    """
    return Markdown(extensions=[RecipeMDExtension]).parse(markdown_source)


def heading_level(element: block.BlockElement) -> Optional[int]:
    """Return the level of a heading element, or None for any other element."""
    if isinstance(element, (block.Heading, block.SetextHeading)):
        return int(element.level)
    return None


def end_of_line(markdown_source: str, pos: int) -> int:
    """Return the offset just after the newline ending the line at 'pos'."""
    newline = markdown_source.find("\n", pos)
    return len(markdown_source) if newline < 0 else newline + 1


def strip_blank_lines(text: str) -> str:
    """
    Remove leading blank lines and trailing whitespace, keeping the
    indentation of the first non-blank line (e.g. of an indented code block).
    """
    lines = text.rstrip().split("\n")
    while lines and not lines[0].strip():
        del lines[0]
    return "\n".join(lines)
