from dataclasses import dataclass


@dataclass(frozen=True)
class Transition:
    id: str
    name: str
    to_status: str | None = None
