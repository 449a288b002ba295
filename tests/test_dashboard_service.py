from datetime import date

from src.student_attendance.student_attendance.core.enums import AttendanceStatus
from src.student_attendance.student_attendance.dashboard.service import DashboardService


def test_stats_for_today(students_repo, attendance_repo, student_factory, mark_factory):
    today = date(2024, 1, 10)
    for sid, standard in [("a", 3), ("b", 3), ("c", 10)]:
        students_repo.save(student_factory(sid, standard=standard))
    attendance_repo.upsert(mark_factory("a", today, AttendanceStatus.PRESENT))
    attendance_repo.upsert(mark_factory("b", today, AttendanceStatus.ABSENT))
    attendance_repo.upsert(mark_factory("c", date(2024, 1, 9), AttendanceStatus.PRESENT))

    stats = DashboardService(students_repo, attendance_repo).get_stats(today=today)

    assert stats.to_dict() == {
        "totalStudents": 3,
        "presentToday": 1,
        "absentToday": 1,
        "studentsByClass": {"3": 2, "10": 1},
    }
