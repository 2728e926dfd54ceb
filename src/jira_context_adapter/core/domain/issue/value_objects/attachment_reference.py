from dataclasses import dataclass


@dataclass(frozen=True)
class AttachmentReference:
    id: str
    filename: str
