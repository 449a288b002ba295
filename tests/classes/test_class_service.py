import pytest

from src.student_attendance.student_attendance.classes.service import ClassService, default_classes
from src.student_attendance.student_attendance.core.exceptions import ValidationError


def test_defaults_when_nothing_saved(classes_repo):
    classes = ClassService(classes_repo).list_classes()

    assert len(classes) == 12
    assert classes[0].to_dict() == {"id": 1, "name": "Class 1", "standard": 1}
    assert classes[-1].standard == 12
    assert classes == default_classes()


def test_replace_then_list(classes_repo):
    svc = ClassService(classes_repo)

    svc.replace_classes([{"id": 1, "name": "Nursery", "standard": 1}, {"id": 2, "name": "KG", "standard": "2"}])

    assert [c.name for c in svc.list_classes()] == ["Nursery", "KG"]
    assert svc.list_classes()[1].standard == 2


@pytest.mark.parametrize(
    "payload, message",
    [
        (None, "Classes array is required"),
        ([], "You must have at least one class"),
        ([{"id": 1, "name": "", "standard": 1}], "Class name is required"),
        ([{"id": 1, "name": "A", "standard": 1}, {"id": 1, "name": "B", "standard": 2}], "Class ids must be unique"),
        ([{"id": 1, "name": "A", "standard": 1}, {"id": 2, "name": "B", "standard": 1}], "Class standards must be unique"),
    ],
)
def test_invalid_class_lists_are_rejected(classes_repo, payload, message):
    with pytest.raises(ValidationError, match=message):
        ClassService(classes_repo).replace_classes(payload)

    assert classes_repo.list_all() == []
