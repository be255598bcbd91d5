from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, never on a
    concrete store. Each call is expected to be atomic on its own; there is no
    transaction spanning several calls. Implementations must reject a save
    that would duplicate an email (case-insensitive) with
    ``DuplicateEmailError``.
    """

    def find_all(self) -> Sequence[User]:
        raise NotImplementedError

    def find_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def find_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def find_by_role(self, role: Role) -> Sequence[User]:
        raise NotImplementedError

    def save(self, user: User) -> User:
        """Insert when ``user.user_id`` is None, otherwise update. Returns the stored user."""
        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
