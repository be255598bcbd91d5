from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from ..core.enums import Role
from ..users.model import NewUser
from ..users.service import UserService
from .connection import DBConfig, DatabaseConnection

logger = logging.getLogger(__name__)

DEMO_USERS = (
    NewUser(name="Alice Johnson", email="alice@example.com", role=Role.USER.value,
            phone="+1234567890", department="Engineering"),
    NewUser(name="Bob Smith", email="bob.smith@company.com", role=Role.USER.value,
            phone="+0987654321", department="Marketing"),
    NewUser(name="Charlie Brown", email="charlie.brown@company.com", role=Role.ADMIN.value,
            phone="+1122334455", department="IT"),
)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql usable regardless of the configured DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal splitter: ';' ends a statement unless it sits inside quotes.
    buf: list[str] = []
    quote = None

    for ch in sql:
        if quote:
            buf.append(ch)
            if ch == quote:
                quote = None
            continue

        if ch in ("'", '"'):
            quote = ch
            buf.append(ch)
            continue

        if ch == ";":
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    """Create the database (if needed) and run every statement of schema.sql."""
    config = DBConfig.from_dict(db_config)
    factory = DatabaseConnection(config)

    conn = factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()

    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))
    conn = factory.connect()
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied to %s@%s/%s", config.user, config.host, config.database)


def ensure_demo_users(user_service: UserService) -> int:
    """Seed the demo users when the store is empty. Returns how many were created."""
    if user_service.count_users() > 0:
        return 0

    logger.info("Initializing demo data...")
    for new in DEMO_USERS:
        user_service.create_user(new)
    logger.info("Demo data initialized successfully")
    return len(DEMO_USERS)
