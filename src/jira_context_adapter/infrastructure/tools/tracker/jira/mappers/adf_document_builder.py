from typing import Any


class AdfDocumentBuilder:
    """Builds minimal ADF documents for outgoing bodies (comments, descriptions)."""

    @staticmethod
    def paragraph_doc(text: str) -> dict[str, Any]:
        return {
            "version": 1,
            "type": "doc",
            "content": [
                {
                    "type": "paragraph",
                    "content": [{"type": "text", "text": text}],
                },
            ],
        }
