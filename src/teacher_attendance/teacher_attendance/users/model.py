from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a login account.

    teacher_id links a TEACHER account to the teacher whose own attendance
    and salary it may read.
    """

    user_id: int
    name: str
    username: str
    password_hash: str
    role: Role
    teacher_id: Optional[int] = None
    is_active: bool = True
