from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import Role
from .model import AdminUser


class AdminUserRepository(Protocol):
    def get_by_email(self, email: str) -> Optional[AdminUser]:
        raise NotImplementedError

    def create_user(self, *, email: str, full_name: str, password_hash: str, role: Role) -> int:
        raise NotImplementedError
