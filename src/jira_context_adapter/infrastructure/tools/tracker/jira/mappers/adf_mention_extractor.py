import re
from typing import Any

from jira_context_adapter.core.domain.issue import Mention, MentionSource, MentionType

ISSUE_KEY_PATTERN = re.compile(r"[A-Z]+-\d+")
BROWSE_URL_PATTERN = re.compile(r"/browse/([A-Z]+-\d+)")


class AdfMentionExtractor:
    """
    Finds references to other issues inside ADF content.

    Two shapes are recognised, depth-first and left-to-right:
    1. `inlineCard` nodes whose `attrs.url` points at `/browse/<KEY>` (smart links
       Jira creates when a user pastes an issue URL).
    2. Bare issue keys (`ABC-123`) anywhere in a `text` node.

    Every node's children are visited whatever its own type. The result is
    deduplicated by key and the first occurrence wins, even when a later one
    carries a different comment_id.
    """

    @classmethod
    def extract(
        cls,
        content: Any,
        source: MentionSource,
        comment_id: str | None = None,
    ) -> tuple[Mention, ...]:
        if source == MentionSource.COMMENT and comment_id is None:
            raise ValueError("comment_id is required for comment mentions")
        if not isinstance(content, list):
            return ()

        found: list[Mention] = []
        stack: list[Any] = list(reversed(content))
        while stack:
            node = stack.pop()
            if not isinstance(node, dict):
                continue

            for key in cls._keys_in_node(node):
                found.append(
                    Mention(key=key, type=MentionType.MENTION, source=source, comment_id=comment_id)
                )

            children = node.get("content")
            if isinstance(children, list):
                stack.extend(reversed(children))

        return cls._first_per_key(found)

    @staticmethod
    def _keys_in_node(node: dict[str, Any]) -> list[str]:
        node_type = node.get("type")

        if node_type == "inlineCard":
            attrs = node.get("attrs") or {}
            url = attrs.get("url") if isinstance(attrs, dict) else None
            if isinstance(url, str):
                match = BROWSE_URL_PATTERN.search(url)
                if match:
                    return [match.group(1)]

        elif node_type == "text":
            text = node.get("text")
            if isinstance(text, str) and text:
                return ISSUE_KEY_PATTERN.findall(text)

        return []

    @staticmethod
    def _first_per_key(mentions: list[Mention]) -> tuple[Mention, ...]:
        unique: dict[str, Mention] = {}
        for mention in mentions:
            unique.setdefault(mention.key, mention)
        return tuple(unique.values())
