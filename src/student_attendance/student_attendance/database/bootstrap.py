"""Schema/seed helpers used on startup (AUTO_INIT_DB / AUTO_SEED_DB) and by scripts/."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

from werkzeug.security import generate_password_hash

from ..core.constants import DEFAULT_ADMIN_EMAIL, DEFAULT_ADMIN_NAME, DEFAULT_ADMIN_PASSWORD
from ..core.enums import Role
from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[4]
SCHEMA_PATH = REPO_ROOT / "database" / "schema.sql"
SEED_PATH = REPO_ROOT / "database" / "seed.sql"


def _strip_create_db_and_use(sql: str) -> str:
    # The target database comes from DB_CONFIG, not from the script.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def split_sql_statements(sql: str) -> Iterator[str]:
    """Split a script on ';' outside of quoted strings, dropping '--' comment lines."""

    lines = [ln for ln in sql.splitlines() if not ln.lstrip().startswith("--")]
    sql = "\n".join(lines)

    start = 0
    quote: str | None = None
    i = 0
    while i < len(sql):
        ch = sql[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            stmt = sql[start:i].strip()
            if stmt:
                yield stmt
            start = i + 1
        i += 1

    tail = sql[start:].strip()
    if tail:
        yield tail


def ensure_database_exists(config: DBConfig) -> None:
    conn = DatabaseConnection(config).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def _run_script(config: DBConfig, path: Path) -> int:
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))
    conn = DatabaseConnection(config).connect()
    count = 0
    try:
        cur = conn.cursor()
        for stmt in split_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
    finally:
        conn.close()
    return count


def apply_schema(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    config = DBConfig.from_dict(db_config)
    ensure_database_exists(config)
    count = _run_script(config, Path(schema_path))
    logger.info("Applied %s (%d statements)", Path(schema_path).name, count)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path = SEED_PATH) -> None:
    config = DBConfig.from_dict(db_config)
    count = _run_script(config, Path(seed_path))
    logger.info("Applied %s (%d statements)", Path(seed_path).name, count)


def ensure_default_admin(db_config: dict) -> bool:
    """Create the default admin account if it is missing. Returns True when created."""

    config = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(config).connect()
    try:
        cur = conn.cursor(dictionary=True)
        cur.execute("SELECT user_id FROM admins WHERE email=%s", (DEFAULT_ADMIN_EMAIL,))
        if cur.fetchone():
            return False
        cur.execute(
            """
            INSERT INTO admins (email, full_name, password_hash, role, is_active)
            VALUES (%s, %s, %s, %s, 1)
            """,
            (DEFAULT_ADMIN_EMAIL, DEFAULT_ADMIN_NAME, generate_password_hash(DEFAULT_ADMIN_PASSWORD), Role.ADMIN.value),
        )
        conn.commit()
        return True
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
