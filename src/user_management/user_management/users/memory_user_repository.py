from __future__ import annotations

import threading
from dataclasses import replace
from typing import Dict, Optional, Sequence

from ..core.enums import Role
from ..core.exceptions import DuplicateEmailError
from .model import User
from .repository import UserRepository


def _email_key(email: Optional[str]) -> str:
    return (email or "").strip().lower()


class InMemoryUserRepository(UserRepository):
    """Process-local store used by default and in tests.

    A single lock makes every call atomic. ``save`` checks email uniqueness
    under the same lock, which closes the check-then-act window left open by
    the service-level pre-check.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: Dict[int, User] = {}
        self._next_id = 1

    def find_all(self) -> Sequence[User]:
        with self._lock:
            return list(self._users.values())

    def find_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(int(user_id))

    def find_by_email(self, email: str) -> Optional[User]:
        key = _email_key(email)
        with self._lock:
            for user in self._users.values():
                if _email_key(user.email) == key:
                    return user
            return None

    def find_by_role(self, role: Role) -> Sequence[User]:
        with self._lock:
            return [u for u in self._users.values() if u.role == role]

    def save(self, user: User) -> User:
        key = _email_key(user.email)
        with self._lock:
            for other in self._users.values():
                if other.user_id != user.user_id and _email_key(other.email) == key:
                    raise DuplicateEmailError(f"User with email {user.email} already exists")

            if user.user_id is None:
                user = replace(user, user_id=self._next_id)
                self._next_id += 1
            self._users[int(user.user_id)] = user
            return user

    def delete_by_id(self, user_id: int) -> bool:
        with self._lock:
            return self._users.pop(int(user_id), None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._users)
