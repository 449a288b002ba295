from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .classes.mysql_class_repository import MySQLClassRepository
from .classes.repository import ClassRepository
from .classes.service import ClassService
from .dashboard.service import DashboardService
from .database.connection import DatabaseConnection, DBConfig
from .photos.service import PhotoService
from .photos.storage import PhotoStorage, S3PhotoStorage, S3StorageConfig
from .reports.service import AttendanceReportService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .users.mysql_admin_repository import MySQLAdminUserRepository
from .users.repository import AdminUserRepository
from .users.service import AdminAccountService


@dataclass(frozen=True)
class Container:
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository
    classes_repo: ClassRepository
    admins_repo: AdminUserRepository
    photo_storage: PhotoStorage

    student_service: StudentService
    class_service: ClassService
    attendance_service: AttendanceService
    report_service: AttendanceReportService
    dashboard_service: DashboardService
    photo_service: PhotoService
    admin_service: AdminAccountService


def assemble(
    *,
    students_repo: StudentRepository,
    attendance_repo: AttendanceRepository,
    classes_repo: ClassRepository,
    admins_repo: AdminUserRepository,
    photo_storage: PhotoStorage,
    url_ttl_seconds: Optional[int] = None,
) -> Container:
    """Wire services on top of any repository implementations (MySQL or in-memory)."""

    photo_kwargs = {"url_ttl_seconds": url_ttl_seconds} if url_ttl_seconds else {}
    return Container(
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        classes_repo=classes_repo,
        admins_repo=admins_repo,
        photo_storage=photo_storage,
        student_service=StudentService(students_repo, attendance_repo, classes_repo),
        class_service=ClassService(classes_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo),
        report_service=AttendanceReportService(attendance_repo, students_repo),
        dashboard_service=DashboardService(students_repo, attendance_repo),
        photo_service=PhotoService(photo_storage, **photo_kwargs),
        admin_service=AdminAccountService(admins_repo),
    )


def build_container(*, db_config: dict, photo_storage_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble(
        students_repo=MySQLStudentRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        classes_repo=MySQLClassRepository(conn),
        admins_repo=MySQLAdminUserRepository(conn),
        photo_storage=S3PhotoStorage(S3StorageConfig.from_dict(photo_storage_config)),
        url_ttl_seconds=photo_storage_config.get("url_ttl_seconds"),
    )
