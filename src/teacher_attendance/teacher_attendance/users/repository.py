from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        name: str,
        username: str,
        password_hash: str,
        role: Role,
        teacher_id: Optional[int],
    ) -> int:
        raise NotImplementedError

    def list_users(self) -> Sequence[User]:
        raise NotImplementedError
