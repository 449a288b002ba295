from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import require_non_empty, require_positive_int
from ..core.constants import DEFAULT_CLASS_COUNT
from ..core.exceptions import ValidationError
from .model import SchoolClass
from .repository import ClassRepository

logger = logging.getLogger(__name__)


def default_classes() -> list[SchoolClass]:
    return [SchoolClass(id=n, name=f"Class {n}", standard=n) for n in range(1, DEFAULT_CLASS_COUNT + 1)]


class ClassService:
    """Use cases: read and replace the configured class list."""

    def __init__(self, classes: ClassRepository):
        self._classes = classes

    def list_classes(self) -> list[SchoolClass]:
        stored = list(self._classes.list_all())
        return stored or default_classes()

    def replace_classes(self, raw_classes: Any) -> list[SchoolClass]:
        if not isinstance(raw_classes, list):
            raise ValidationError("Classes array is required")
        if not raw_classes:
            raise ValidationError("You must have at least one class")

        classes: list[SchoolClass] = []
        for item in raw_classes:
            if not isinstance(item, dict):
                raise ValidationError("Each class must be an object with id, name and standard")
            classes.append(
                SchoolClass(
                    id=require_positive_int(item.get("id"), "Class id"),
                    name=require_non_empty(item.get("name"), "Class name"),
                    standard=require_positive_int(item.get("standard"), "Standard"),
                )
            )

        if len({c.id for c in classes}) != len(classes):
            raise ValidationError("Class ids must be unique")
        if len({c.standard for c in classes}) != len(classes):
            raise ValidationError("Class standards must be unique")

        self._classes.replace_all(classes)
        logger.info("Replaced class list (%d classes)", len(classes))
        return classes
