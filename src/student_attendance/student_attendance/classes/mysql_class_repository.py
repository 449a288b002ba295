from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import SchoolClass
from .repository import ClassRepository


class MySQLClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[SchoolClass]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT class_id, name, standard FROM classes ORDER BY position ASC, class_id ASC")
            return [
                SchoolClass(id=int(r["class_id"]), name=r["name"], standard=int(r["standard"]))
                for r in fetchall(cur)
            ]

    def replace_all(self, classes: Sequence[SchoolClass]) -> None:
        # DELETE and INSERT commit together.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM classes")
            cur.executemany(
                "INSERT INTO classes(class_id, name, standard, position) VALUES(%s,%s,%s,%s)",
                [(c.id, c.name, c.standard, pos) for pos, c in enumerate(classes)],
            )
