import pytest

from typing import List, Optional

from marko import inline  # type: ignore

from recipe_md.markdown.common import parse_markdown

from recipe_md.markdown.inline import extract_text, find_metadata_runs


def paragraph_elements(markdown_source: str) -> List[inline.InlineElement]:
    return list(parse_markdown(markdown_source).children[0].children)


class TestExtractText:
    @pytest.mark.parametrize(
        "markdown_source, exp",
        [
            ("plain text", "plain text"),
            # Markup dropped
            ("a *b* **c** [d](e.md)", "a b c d"),
            ("***both***", "both"),
            # Code and escapes read as text
            ("`code` here", "code here"),
            (r"\*not emphasis\*", "*not emphasis*"),
            # Line breaks
            ("one\ntwo", "one two"),
            ("one  \ntwo", "one\ntwo"),
        ],
    )
    def test_extract_text(self, markdown_source: str, exp: str) -> None:
        assert extract_text(paragraph_elements(markdown_source)) == exp


class TestFindMetadataRuns:
    @pytest.mark.parametrize(
        "markdown_source, exp_emphasis, exp_strong",
        [
            ("*vegan, quick*", "vegan, quick", None),
            ("**4 servings**", None, "4 servings"),
            ("*vegan*\n**4 servings**", "vegan", "4 servings"),
            ("**4 servings**\n*vegan*", "vegan", "4 servings"),
            ("*vegan* **4 servings**", "vegan", "4 servings"),
        ],
    )
    def test_metadata(
        self,
        markdown_source: str,
        exp_emphasis: Optional[str],
        exp_strong: Optional[str],
    ) -> None:
        runs = find_metadata_runs(paragraph_elements(markdown_source))
        assert runs is not None
        if exp_emphasis is None:
            assert runs.emphasis is None
        else:
            assert extract_text(runs.emphasis.children) == exp_emphasis
        if exp_strong is None:
            assert runs.strong is None
        else:
            assert extract_text(runs.strong.children) == exp_strong

    @pytest.mark.parametrize(
        "markdown_source",
        [
            # No emphasis at all
            "Just some text.",
            # Emphasis within prose
            "This is *really* good.",
            "*Really* good.",
            # Repeated runs
            "*vegan* *quick*",
            "**4 servings** **200 g**",
            # Non-text content within a run
            "*see [here](here.md)*",
            "**4 *big* servings**",
        ],
    )
    def test_prose(self, markdown_source: str) -> None:
        assert find_metadata_runs(paragraph_elements(markdown_source)) is None
