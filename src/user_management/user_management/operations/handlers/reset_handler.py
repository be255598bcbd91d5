from __future__ import annotations

from datetime import datetime

from ...users.model import User
from .base import OperationHandler


class ResetAccountHandler(OperationHandler):
    """Clear phone and department, unconditionally."""

    def apply(self, user: User, *, now: datetime) -> User:
        return user.touched(now, phone=None, department=None)
