from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.enums import Permission, Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..core.permissions import ROLE_PERMISSIONS, has_permission
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: int
    name: str
    role: Role
    teacher_id: Optional[int]

    @property
    def permissions(self) -> list[str]:
        return sorted(p.value for p in ROLE_PERMISSIONS.get(self.role, frozenset()))


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        user = self._users.get_by_username((username or "").strip())
        if not user or not user.is_active:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("Failed login for %s", username)
            raise AuthenticationError("Invalid username or password")

        return SessionUser(user_id=user.user_id, name=user.name, role=user.role, teacher_id=user.teacher_id)


class UserService:
    """Use case: manage login accounts (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def create_account(
        self,
        *,
        current_role: Union[Role, str],
        name: str,
        username: str,
        password: str,
        role: Union[Role, str],
        teacher_id: Optional[int] = None,
    ) -> int:
        if not has_permission(current_role, Permission.MANAGE_USERS):
            raise AuthorizationError("You do not have permission to manage users")

        name = require_non_empty(name, "Name")
        username = require_non_empty(username, "Username")
        require_min_length(password, "Password", 6)
        try:
            new_role = Role(role)
        except ValueError as exc:
            raise ValidationError(f"Unknown role: {role!r}") from exc

        if new_role == Role.TEACHER and teacher_id is None:
            raise ValidationError("Teacher accounts must be linked to a teacher")
        if self._users.get_by_username(username):
            raise ValidationError("Username already exists")

        user_id = self._users.create_user(
            name=name,
            username=username,
            password_hash=generate_password_hash(password),
            role=new_role,
            teacher_id=int(teacher_id) if teacher_id is not None else None,
        )
        logger.info("User created: id=%s username=%s role=%s", user_id, username, new_role.value)
        return user_id

    def list_users(self):
        return list(self._users.list_users())
