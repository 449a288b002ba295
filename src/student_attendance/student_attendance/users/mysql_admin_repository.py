from __future__ import annotations

from typing import Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import AdminUser
from .repository import AdminUserRepository


class MySQLAdminUserRepository(AdminUserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[AdminUser]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, email, full_name, password_hash, role, is_active
                FROM admins
                WHERE email=%s
                """,
                (email,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return AdminUser(
                user_id=int(row["user_id"]),
                email=row["email"],
                full_name=row["full_name"],
                password_hash=row["password_hash"],
                role=Role(row["role"]),
                is_active=bool(row.get("is_active", True)),
            )

    def create_user(self, *, email: str, full_name: str, password_hash: str, role: Role) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO admins(email, full_name, password_hash, role, is_active)
                VALUES(%s,%s,%s,%s,1)
                """,
                (email, full_name, password_hash, role.value),
            )
            return int(cur.lastrowid)
