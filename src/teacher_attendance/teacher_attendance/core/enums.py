from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for access control."""

    ADMIN = "admin"
    MANAGER = "manager"
    VIEWER = "viewer"
    TEACHER = "teacher"


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the database and as resolved."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class HolidayType(str, Enum):
    FESTIVAL = "festival"
    SCHOOL = "school"


class Permission(str, Enum):
    READ_TEACHERS = "read_teachers"
    WRITE_TEACHERS = "write_teachers"
    READ_ATTENDANCE = "read_attendance"
    WRITE_ATTENDANCE = "write_attendance"
    READ_REPORTS = "read_reports"
    READ_SALARY = "read_salary"
    MANAGE_USERS = "manage_users"
    MANAGE_SETTINGS = "manage_settings"
    READ_TEACHERS_SELF = "read_teachers_self"
    READ_ATTENDANCE_SELF = "read_attendance_self"
    READ_SALARY_SELF = "read_salary_self"


class ReportPeriod(str, Enum):
    """Preset reporting windows offered by the reports screen."""

    CURRENT_MONTH = "current-month"
    LAST_MONTH = "last-month"
    LAST_3_MONTHS = "last-3-months"
    CURRENT_YEAR = "current-year"
