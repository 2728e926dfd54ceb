from enum import StrEnum


class MentionSource(StrEnum):
    DESCRIPTION = "description"
    COMMENT = "comment"
