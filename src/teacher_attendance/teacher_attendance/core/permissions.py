from __future__ import annotations

from typing import Iterable, Union

from .enums import Permission, Role

ROLE_PERMISSIONS: dict[Role, frozenset[Permission]] = {
    Role.ADMIN: frozenset(
        {
            Permission.READ_TEACHERS,
            Permission.WRITE_TEACHERS,
            Permission.READ_ATTENDANCE,
            Permission.WRITE_ATTENDANCE,
            Permission.READ_REPORTS,
            Permission.READ_SALARY,
            Permission.MANAGE_USERS,
            Permission.MANAGE_SETTINGS,
        }
    ),
    Role.MANAGER: frozenset({Permission.READ_ATTENDANCE, Permission.WRITE_ATTENDANCE}),
    Role.VIEWER: frozenset({Permission.READ_ATTENDANCE}),
    Role.TEACHER: frozenset(
        {
            Permission.READ_TEACHERS_SELF,
            Permission.READ_ATTENDANCE_SELF,
            Permission.READ_SALARY_SELF,
        }
    ),
}


def _as_role(role: Union[Role, str, None]) -> Role | None:
    if role is None:
        return None
    try:
        return Role(role)
    except ValueError:
        return None


def has_permission(role: Union[Role, str, None], permission: Permission) -> bool:
    r = _as_role(role)
    if r is None:
        return False
    return permission in ROLE_PERMISSIONS.get(r, frozenset())


def has_any_permission(role: Union[Role, str, None], permissions: Iterable[Permission]) -> bool:
    return any(has_permission(role, p) for p in permissions)
