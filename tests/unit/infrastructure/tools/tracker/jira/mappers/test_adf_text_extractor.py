"""Unit tests: AdfTextExtractor (pure, no I/O)."""

import pytest
from support import inline_card, paragraph, text

from jira_context_adapter.infrastructure.tools.tracker.jira.mappers.adf_text_extractor import AdfTextExtractor


class TestExtract:
    def test_concatenates_text_nodes_depth_first(self) -> None:
        content = [
            paragraph(text("Hello "), text("world")),
            {"type": "bulletList", "content": [{"type": "listItem", "content": [paragraph(text("!"))]}]},
        ]
        assert AdfTextExtractor.extract(content) == "Hello world!"

    def test_paragraph_boundaries_add_no_separator(self) -> None:
        content = [paragraph(text("first")), paragraph(text("second"))]
        assert AdfTextExtractor.extract(content) == "firstsecond"

    def test_non_text_leaves_contribute_nothing(self) -> None:
        content = [paragraph(text("see "), inline_card("https://x.atlassian.net/browse/ABC-1"), {"type": "hardBreak"})]
        assert AdfTextExtractor.extract(content) == "see "

    def test_text_node_without_text_contributes_empty_string(self) -> None:
        content = [paragraph({"type": "text"}, {"type": "text", "text": None}, text("x"))]
        assert AdfTextExtractor.extract(content) == "x"

    def test_text_node_with_non_string_text_contributes_nothing(self) -> None:
        content = [paragraph({"type": "text", "text": 7}, {"type": "text", "text": ["a"]}, text("y"))]
        assert AdfTextExtractor.extract(content) == "y"

    @pytest.mark.parametrize("value", [None, "plain string", {"type": "doc"}, 42])
    def test_non_list_input_returns_empty_string(self, value) -> None:
        assert AdfTextExtractor.extract(value) == ""

    def test_tree_without_text_nodes_returns_empty_string(self) -> None:
        content = [
            paragraph(inline_card("https://x/browse/A-1")),
            {"type": "rule"},
            {"type": "mediaSingle", "content": [{"type": "media", "attrs": {"id": "abc"}}]},
        ]
        assert AdfTextExtractor.extract(content) == ""

    def test_is_associative_over_siblings(self) -> None:
        a = paragraph(text("alpha "), {"type": "strong", "content": [text("beta")]})
        b = {"type": "codeBlock", "content": [text("gamma")]}

        combined = AdfTextExtractor.extract([a, b])

        assert combined == AdfTextExtractor.extract([a]) + AdfTextExtractor.extract([b])
        assert combined == "alpha betagamma"

    def test_skips_non_dict_entries(self) -> None:
        content = ["junk", None, paragraph(text("ok"), 7)]
        assert AdfTextExtractor.extract(content) == "ok"

    def test_handles_very_deep_documents(self) -> None:
        node = text("bottom")
        for _ in range(5000):
            node = {"type": "blockquote", "content": [node]}
        assert AdfTextExtractor.extract([node]) == "bottom"
