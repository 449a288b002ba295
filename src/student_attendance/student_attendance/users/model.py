from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class AdminUser:
    """Domain entity: an administrative account.

    Plain data object; no database access here.
    """

    user_id: int
    email: str
    full_name: str
    password_hash: str
    role: Role = Role.ADMIN
    is_active: bool = True

    def to_public_dict(self) -> dict:
        return {"id": self.user_id, "email": self.email}
