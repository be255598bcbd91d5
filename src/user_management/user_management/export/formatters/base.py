from __future__ import annotations

from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Sequence

from ...common.datetime_utils import isoformat_or_empty
from ...core.enums import Role
from ...users.model import User

EXPORT_FIELDS = (
    "id",
    "name",
    "email",
    "role",
    "phone",
    "department",
    "active",
    "created_by",
    "updated_by",
    "created_at",
    "updated_at",
)


def _text(value) -> str:
    return "" if value is None else str(value)


def export_row(user: User) -> "OrderedDict[str, object]":
    """Flatten a user into export order. Missing text becomes "", missing active becomes False."""
    role = user.role.value if isinstance(user.role, Role) else _text(user.role)
    return OrderedDict(
        [
            ("id", user.user_id),
            ("name", _text(user.name)),
            ("email", _text(user.email)),
            ("role", role),
            ("phone", _text(user.phone)),
            ("department", _text(user.department)),
            ("active", bool(user.active) if user.active is not None else False),
            ("created_by", _text(user.created_by)),
            ("updated_by", _text(user.updated_by)),
            ("created_at", isoformat_or_empty(user.created_at)),
            ("updated_at", isoformat_or_empty(user.updated_at)),
        ]
    )


class ExportFormatter(ABC):
    """Formatter interface (Strategy Pattern for export)."""

    media_type = "text/plain"
    extension = "txt"

    @abstractmethod
    def render(self, users: Sequence[User]) -> str:
        raise NotImplementedError
