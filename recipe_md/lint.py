"""
Descriptions of content which the (lenient) RecipeMD parser ignored.

The parser never fails because of a badly written ingredient or yield: such
content is silently dropped. Each time this happens a :py:class:`Lint` is
recorded, which may be obtained using
:py:func:`recipe_md.markdown.check` (or
:py:func:`recipe_md.markdown.parse_with_diagnostics`) to warn the user about
likely mistakes.

.. autoclass:: Lint
    :members:
    :undoc-members:

Different categories of lint are identified by members of the following
enumeration. Further details, however, are only given as human-readable
strings.

.. autoclass:: LintKind
    :members:
    :undoc-members:

"""

from dataclasses import dataclass

from enum import Enum, auto


__all__ = [
    "LintKind",
    "Lint",
    "AMOUNT_LINT_KINDS",
]


class LintKind(Enum):
    """Kinds of lint."""

    ingredient_without_name = auto()
    ingredient_not_a_paragraph = auto()
    amount_not_a_number = auto()
    yield_not_a_number = auto()
    duplicate_metadata = auto()
    empty_group_title = auto()


AMOUNT_LINT_KINDS = frozenset(
    [LintKind.amount_not_a_number, LintKind.yield_not_a_number]
)
"""The kinds of lint which are errors in strict mode."""


@dataclass(frozen=True)
class Lint:
    """
    A description of a piece of lint found in a recipe.
    """

    kind: LintKind
    description: str

    text: str = ""
    """The offending text, where there is some."""
