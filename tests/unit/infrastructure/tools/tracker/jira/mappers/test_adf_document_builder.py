from jira_context_adapter.infrastructure.tools.tracker.jira.mappers.adf_document_builder import AdfDocumentBuilder
from jira_context_adapter.infrastructure.tools.tracker.jira.mappers.adf_text_extractor import AdfTextExtractor


def test_paragraph_doc_wraps_text_in_one_paragraph() -> None:
    assert AdfDocumentBuilder.paragraph_doc("Done here") == {
        "version": 1,
        "type": "doc",
        "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Done here"}]}],
    }


def test_paragraph_doc_reads_back_as_the_same_text() -> None:
    document = AdfDocumentBuilder.paragraph_doc("See PROJ-1")

    assert AdfTextExtractor.extract(document["content"]) == "See PROJ-1"
