from datetime import date

import pytest

from src.student_attendance.student_attendance.classes.model import SchoolClass
from src.student_attendance.student_attendance.core.enums import AttendanceStatus
from src.student_attendance.student_attendance.core.exceptions import NotFoundError, ValidationError
from src.student_attendance.student_attendance.students.service import StudentService


def _payload(**overrides):
    data = {
        "firstName": "Asha",
        "fatherName": "Ravi",
        "surname": "Patil",
        "dateOfBirth": "2014-06-01",
        "mobileNumber": "9123456789",
        "standard": 5,
        "address": "12 MG Road",
        "school": "North",
    }
    data.update(overrides)
    return data


@pytest.fixture
def service(students_repo, attendance_repo, classes_repo):
    ids = iter(["s1", "s2", "s3"])
    return StudentService(students_repo, attendance_repo, classes_repo, id_factory=lambda: next(ids))


def test_create_student(service, students_repo, fixed_now):
    student = service.create_student(_payload(), now=fixed_now)

    assert student.id == "s1"
    assert student.full_name == "Asha Ravi Patil"
    assert student.date_of_birth == date(2014, 6, 1)
    assert student.created_at == student.updated_at == fixed_now
    assert students_repo.get_by_id("s1") == student


def test_create_accepts_standard_as_text(service):
    assert service.create_student(_payload(standard="7")).standard == 7


def test_create_rejects_invalid_mobile(service, students_repo):
    with pytest.raises(ValidationError, match="Invalid Indian mobile number"):
        service.create_student(_payload(mobileNumber="5123456789"))

    assert students_repo.list_all() == []


def test_create_lists_every_missing_field(service):
    with pytest.raises(ValidationError) as exc:
        service.create_student({"firstName": "Asha", "surname": ""})

    assert str(exc.value) == "Missing required fields: fatherName, surname, dateOfBirth, mobileNumber, standard"


def test_unknown_standard_is_only_a_warning(service, classes_repo, caplog):
    classes_repo.replace_all([SchoolClass(id=1, name="Class 1", standard=1)])

    student = service.create_student(_payload(standard=9))

    assert student.standard == 9
    assert "does not match any configured class" in caplog.text


def test_partial_update_keeps_other_fields(service, fixed_now):
    created = service.create_student(_payload(), now=fixed_now)

    updated = service.update_student(created.id, {"address": "7 Station Road"})

    assert updated.address == "7 Station Road"
    assert updated.first_name == created.first_name
    assert updated.mobile_number == created.mobile_number
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


def test_update_validates_changed_fields(service):
    created = service.create_student(_payload())

    with pytest.raises(ValidationError):
        service.update_student(created.id, {"mobileNumber": "12345"})


def test_update_missing_student(service):
    with pytest.raises(NotFoundError, match="Student not found"):
        service.update_student("nope", {"address": "x"})


def test_delete_cascades_to_attendance(service, students_repo, attendance_repo, mark_factory):
    keep = service.create_student(_payload())
    drop = service.create_student(_payload(firstName="Meera"))
    attendance_repo.upsert(mark_factory(keep.id, date(2024, 1, 1), AttendanceStatus.PRESENT))
    attendance_repo.upsert(mark_factory(drop.id, date(2024, 1, 1), AttendanceStatus.ABSENT))
    attendance_repo.upsert(mark_factory(drop.id, date(2024, 1, 2), AttendanceStatus.PRESENT))

    removed = service.delete_student(drop.id)

    assert removed == 2
    assert students_repo.get_by_id(drop.id) is None
    assert [r.student_id for r in attendance_repo.list_all()] == [keep.id]


def test_list_schools_is_sorted_and_distinct(service):
    service.create_student(_payload(school="South"))
    service.create_student(_payload(school="North"))
    service.create_student(_payload(school=None))

    assert service.list_schools() == ["North", "South"]


def test_non_text_optional_fields_are_rejected(service, students_repo):
    with pytest.raises(ValidationError, match="School must be text"):
        service.create_student(_payload(school=7))

    assert students_repo.list_all() == []
