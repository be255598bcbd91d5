from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..core.enums import Role
from ..core.exceptions import DuplicateEmailError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import DUPLICATE_ENTRY_ERRNO, db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_COLUMNS = (
    "id, name, email, role, phone, department, active, "
    "created_by, updated_by, created_at, updated_at"
)


def _row_to_user(row: Dict[str, Any]) -> User:
    return User(
        user_id=int(row["id"]),
        name=row["name"],
        email=row["email"],
        role=Role(row["role"]) if row.get("role") else None,
        phone=row.get("phone"),
        department=row.get("department"),
        active=bool(row["active"]) if row.get("active") is not None else None,
        created_by=row.get("created_by"),
        updated_by=row.get("updated_by"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLUserRepository(UserRepository):
    """mysql-connector backed store.

    Email uniqueness is enforced by the ``uq_users_email`` index; the table
    collation is case-insensitive so ``A@x.io`` and ``a@x.io`` collide.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users ORDER BY id")
            return [_row_to_user(r) for r in fetchall(cur)]

    def find_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE id=%s", (int(user_id),))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def find_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE email=%s", (email.strip(),))
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def find_by_role(self, role: Role) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE role=%s ORDER BY id", (role.value,))
            return [_row_to_user(r) for r in fetchall(cur)]

    def save(self, user: User) -> User:
        params = (
            user.name,
            user.email,
            user.role.value,
            user.phone,
            user.department,
            1 if user.active else 0,
            user.created_by,
            user.updated_by,
            user.created_at,
            user.updated_at,
        )
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                if user.user_id is None:
                    cur.execute(
                        """
                        INSERT INTO users(name, email, role, phone, department, active,
                                          created_by, updated_by, created_at, updated_at)
                        VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                        """,
                        params,
                    )
                    user_id = int(cur.lastrowid)
                else:
                    cur.execute(
                        """
                        UPDATE users
                        SET name=%s, email=%s, role=%s, phone=%s, department=%s, active=%s,
                            created_by=%s, updated_by=%s, created_at=%s, updated_at=%s
                        WHERE id=%s
                        """,
                        params + (int(user.user_id),),
                    )
                    user_id = int(user.user_id)
        except mysql.connector.IntegrityError as e:
            if getattr(e, "errno", None) == DUPLICATE_ENTRY_ERRNO:
                raise DuplicateEmailError(f"User with email {user.email} already exists") from e
            raise

        found = self.find_by_id(user_id)
        if found is None:
            raise RuntimeError(f"User {user_id} vanished after save")
        return found

    def delete_by_id(self, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE id=%s", (int(user_id),))
            return cur.rowcount > 0

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM users")
            row = fetchone(cur)
            return int(row["total"]) if row else 0
