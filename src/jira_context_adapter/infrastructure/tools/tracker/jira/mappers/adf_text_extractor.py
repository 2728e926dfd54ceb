from typing import Any


class AdfTextExtractor:
    """
    Flattens Atlassian Document Format (ADF) content into plain text.

    Only `text` nodes contribute; containers contribute the concatenation of
    their children. Block boundaries (paragraphs, list items...) do NOT add
    whitespace, so adjacent paragraphs run together. Callers that need line
    breaks must walk the document themselves.

    The walk uses an explicit stack instead of recursion, so deeply nested
    documents cannot hit the interpreter recursion limit.
    """

    @staticmethod
    def extract(content: Any) -> str:
        if not isinstance(content, list):
            return ""

        parts: list[str] = []
        # Children are pushed in reverse so they pop left-to-right.
        stack: list[Any] = list(reversed(content))
        while stack:
            node = stack.pop()
            if not isinstance(node, dict):
                continue

            if node.get("type") == "text":
                text = node.get("text")
                if isinstance(text, str):
                    parts.append(text)
                continue

            children = node.get("content")
            if isinstance(children, list):
                stack.extend(reversed(children))

        return "".join(parts)
