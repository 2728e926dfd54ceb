from enum import StrEnum


class MentionType(StrEnum):
    MENTION = "mention"
    LINK = "link"
