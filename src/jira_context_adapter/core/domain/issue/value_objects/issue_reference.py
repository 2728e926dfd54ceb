from dataclasses import dataclass


@dataclass(frozen=True)
class IssueReference:
    id: str
    key: str
    summary: str | None = None
