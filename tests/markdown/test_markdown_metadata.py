import pytest

from typing import List, Optional, Tuple

from textwrap import dedent

from recipe_md.recipe import Amount, Yield

from recipe_md.lint import Lint, LintKind

from recipe_md.markdown.common import parse_markdown

from recipe_md.markdown.metadata import Metadata, split_list, parse_metadata


def parse_metadata_source(
    markdown_source: str, lints: Optional[List[Lint]] = None
) -> Metadata:
    return parse_metadata(parse_markdown(dedent(markdown_source)).children, lints)


@pytest.mark.parametrize(
    "text, exp",
    [
        ("", []),
        ("a", ["a"]),
        ("a, b", ["a", "b"]),
        (" a ,b ,, c, ", ["a", "b", "c"]),
    ],
)
def test_split_list(text: str, exp: List[str]) -> None:
    assert split_list(text) == exp


class TestParseMetadata:
    def test_empty(self) -> None:
        assert parse_metadata_source("") == Metadata(None, (), Yield())

    @pytest.mark.parametrize(
        "markdown_source, exp_description",
        [
            ("A description.", "A description."),
            ("One.\n\nTwo.", "One.\n\nTwo."),
            # Soft breaks within a paragraph become spaces
            ("Line one\nline two.", "Line one line two."),
            # Inline markup is dropped
            ("This is *really* [good](good.md).", "This is really good."),
            # Emphasis yielding no tags or yield is prose
            ("**lots**", "lots"),
        ],
    )
    def test_description(self, markdown_source: str, exp_description: str) -> None:
        lints: List[Lint] = []
        assert parse_metadata_source(markdown_source, lints) == Metadata(
            exp_description, (), Yield()
        )
        assert lints == []

    @pytest.mark.parametrize(
        "markdown_source, exp_tags",
        [
            ("*vegan*", ("vegan",)),
            ("*vegan, quick, Mexican*", ("vegan", "quick", "Mexican")),
            ("*vegan,, quick,*", ("vegan", "quick")),
        ],
    )
    def test_tags(self, markdown_source: str, exp_tags: Tuple[str, ...]) -> None:
        assert parse_metadata_source(markdown_source).tags == exp_tags

    @pytest.mark.parametrize(
        "markdown_source, exp_amounts",
        [
            ("**4 Servings**", (Amount(4.0, "4", "Servings"),)),
            (
                "**4 Servings, 200 g**",
                (Amount(4.0, "4", "Servings"), Amount(200.0, "200", "g")),
            ),
            ("**1 1/2 cups**", (Amount(1.5, "1 1/2", "cups"),)),
            ("**12**", (Amount(12.0, "12"),)),
            # Comma separated, so decimal commas can't be used
            ("**1,5 kg**", (Amount(1.0, "1"), Amount(5.0, "5", "kg"))),
        ],
    )
    def test_yield(
        self, markdown_source: str, exp_amounts: Tuple[Amount, ...]
    ) -> None:
        assert parse_metadata_source(markdown_source).yield_ == Yield(exp_amounts)

    def test_everything(self) -> None:
        assert parse_metadata_source(
            """
            Guacamole is a dip.

            It is green.

            *vegan, Mexican*
            **4 Servings, 200 g**
            """
        ) == Metadata(
            "Guacamole is a dip.\n\nIt is green.",
            ("vegan", "Mexican"),
            Yield((Amount(4.0, "4", "Servings"), Amount(200.0, "200", "g"))),
        )

    def test_metadata_between_description(self) -> None:
        metadata = parse_metadata_source(
            """
            Before.

            *tag*

            After.
            """
        )
        assert metadata.description == "Before.\n\nAfter."
        assert metadata.tags == ("tag",)

    def test_non_paragraphs_ignored(self) -> None:
        metadata = parse_metadata_source(
            """
            ## Heading

            - list

            > quote

            Text.
            """
        )
        assert metadata == Metadata("Text.", (), Yield())

    def test_last_tags_win(self) -> None:
        lints: List[Lint] = []
        metadata = parse_metadata_source(
            """
            *first, tags*

            *second*
            """,
            lints,
        )
        assert metadata.tags == ("second",)
        assert [lint.kind for lint in lints] == [LintKind.duplicate_metadata]
        assert lints[0].text == "first, tags"

    def test_last_yield_wins(self) -> None:
        lints: List[Lint] = []
        metadata = parse_metadata_source(
            """
            *tag*
            **2 Servings**

            **4 Servings**
            """,
            lints,
        )
        assert metadata.tags == ("tag",)
        assert metadata.yield_ == Yield((Amount(4.0, "4", "Servings"),))
        assert [lint.kind for lint in lints] == [LintKind.duplicate_metadata]
        assert lints[0].text == "2 Servings"

    def test_yield_without_number(self) -> None:
        lints: List[Lint] = []
        metadata = parse_metadata_source("**4 Servings, some cake**", lints)
        assert metadata.yield_ == Yield((Amount(4.0, "4", "Servings"),))
        assert lints == [
            Lint(
                LintKind.yield_not_a_number,
                "Yield 'some cake' does not start with a number.",
                "some cake",
            )
        ]
