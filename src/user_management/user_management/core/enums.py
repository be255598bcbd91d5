from __future__ import annotations

from enum import Enum

from .exceptions import InvalidRoleError, UnknownOperationError, UnsupportedExportFormatError


class Role(str, Enum):
    """User role. Only these two values may be persisted."""

    USER = "USER"
    ADMIN = "ADMIN"

    @classmethod
    def parse(cls, value: object) -> "Role":
        if isinstance(value, Role):
            return value
        token = str(value or "").strip().upper()
        try:
            return cls(token)
        except ValueError:
            raise InvalidRoleError(f"Invalid role: {value!r}")


class UserOperation(str, Enum):
    """State transitions that can be applied to a single user."""

    PROMOTE_TO_ADMIN = "promote_to_admin"
    DEMOTE_TO_USER = "demote_to_user"
    RESET_ACCOUNT = "reset_account"

    @classmethod
    def parse(cls, value: object) -> "UserOperation":
        if isinstance(value, UserOperation):
            return value
        token = str(value or "").strip().lower()
        try:
            return cls(token)
        except ValueError:
            raise UnknownOperationError(f"Unknown operation: {value!r}")


class ExportFormat(str, Enum):
    JSON = "json"
    CSV = "csv"
    XML = "xml"

    @classmethod
    def parse(cls, value: object) -> "ExportFormat":
        if isinstance(value, ExportFormat):
            return value
        token = str(value or "").strip().lower()
        try:
            return cls(token)
        except ValueError:
            raise UnsupportedExportFormatError(f"Unsupported export format: {value!r}")
