from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SchoolClass:
    """A class/grade; `standard` is the key students are grouped by."""

    id: int
    name: str
    standard: int

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "standard": self.standard}
