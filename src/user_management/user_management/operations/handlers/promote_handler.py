from __future__ import annotations

from datetime import datetime

from ...core.enums import Role
from ...users.model import User
from .base import OperationHandler


class PromoteToAdminHandler(OperationHandler):
    """USER -> ADMIN. Already an admin: no-op."""

    def apply(self, user: User, *, now: datetime) -> User:
        if user.is_admin:
            return user
        return user.touched(now, role=Role.ADMIN)
