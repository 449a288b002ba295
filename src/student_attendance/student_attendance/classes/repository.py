from __future__ import annotations

from typing import Protocol, Sequence

from .model import SchoolClass


class ClassRepository(Protocol):
    def list_all(self) -> Sequence[SchoolClass]:
        """Stored classes in saved order; empty when nothing was saved yet."""
        raise NotImplementedError

    def replace_all(self, classes: Sequence[SchoolClass]) -> None:
        raise NotImplementedError
