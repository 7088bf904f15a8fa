from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.resolver import StatusResolver
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayRepository
from .holidays.service import HolidayService
from .payroll.service import PayrollService
from .reports.service import AttendanceReportService
from .teachers.mysql_teacher_repository import MySQLTeacherRepository
from .teachers.repository import TeacherRepository
from .teachers.service import TeacherService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    teachers_repo: TeacherRepository
    attendance_repo: AttendanceRepository
    holidays_repo: HolidayRepository

    auth_service: AuthService
    user_service: UserService
    teacher_service: TeacherService
    holiday_service: HolidayService
    attendance_service: AttendanceService
    payroll_service: PayrollService
    report_service: AttendanceReportService


def build_services(
    *,
    users_repo: UserRepository,
    teachers_repo: TeacherRepository,
    attendance_repo: AttendanceRepository,
    holidays_repo: HolidayRepository,
    exclude_holidays: bool = False,
    strict: bool = False,
) -> Container:
    """Wire services over any repositories satisfying the repository protocols."""
    attendance_service = AttendanceService(
        attendance_repo,
        teachers_repo,
        holidays_repo,
        resolver=StatusResolver(),
        strict=strict,
    )
    return Container(
        users_repo=users_repo,
        teachers_repo=teachers_repo,
        attendance_repo=attendance_repo,
        holidays_repo=holidays_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        teacher_service=TeacherService(teachers_repo),
        holiday_service=HolidayService(holidays_repo),
        attendance_service=attendance_service,
        payroll_service=PayrollService(attendance_service),
        report_service=AttendanceReportService(attendance_service, exclude_holidays=exclude_holidays),
    )


def build_container(*, db_config: dict, exclude_holidays: bool = False, strict: bool = False) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        users_repo=MySQLUserRepository(conn),
        teachers_repo=MySQLTeacherRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        holidays_repo=MySQLHolidayRepository(conn),
        exclude_holidays=exclude_holidays,
        strict=strict,
    )
