import pytest

from src.student_attendance.student_attendance.views.student_filters import (
    CLEAR,
    SET_SCHOOL,
    SET_SEARCH,
    SET_STANDARD,
    StudentFilters,
    filter_students,
    reduce_filters,
)


def test_reducer_returns_new_state():
    start = StudentFilters()

    state = reduce_filters(start, SET_SEARCH, "  asha ")
    state = reduce_filters(state, SET_STANDARD, 5)

    assert start == StudentFilters()
    assert state.search_term == "asha"
    assert state.standard == "5"
    assert state.is_active


def test_blank_values_mean_all():
    state = StudentFilters.from_query("", "", None)

    assert state == StudentFilters()
    assert not state.is_active


def test_clear_resets_everything():
    state = StudentFilters.from_query("x", "North", "3")

    assert reduce_filters(state, CLEAR) == StudentFilters()


def test_unknown_action():
    with pytest.raises(ValueError):
        reduce_filters(StudentFilters(), "sort")


def test_filter_by_search_school_and_standard(student_factory):
    students = [
        student_factory("a", first_name="Asha", school="North", standard=3),
        student_factory("b", first_name="Meera", school="South", standard=3, mobile_number="9000000001"),
        student_factory("c", first_name="Kiran", surname="Asharam", school="North", standard=4),
    ]

    assert [s.id for s in filter_students(students, StudentFilters(search_term="ASHA"))] == ["a", "c"]
    assert [s.id for s in filter_students(students, StudentFilters(search_term="900000"))] == ["b"]
    assert [s.id for s in filter_students(students, reduce_filters(StudentFilters(), SET_SCHOOL, "North"))] == ["a", "c"]
    assert [s.id for s in filter_students(students, StudentFilters.from_query(None, "North", "4"))] == ["c"]
