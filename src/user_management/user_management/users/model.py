from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Optional

from ..core.constants import SYSTEM_ACTOR
from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data object (no DB access). Mutations go through ``touched`` /
    ``dataclasses.replace`` and return a new instance, so an unsaved change
    can simply be dropped.
    """

    user_id: Optional[int]
    name: str
    email: str
    role: Role
    phone: Optional[str] = None
    department: Optional[str] = None
    active: bool = True
    created_by: str = SYSTEM_ACTOR
    updated_by: str = SYSTEM_ACTOR
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def touched(self, now: datetime, **changes: Any) -> "User":
        """Apply ``changes`` and refresh the audit fields."""
        return replace(self, updated_at=now, updated_by=SYSTEM_ACTOR, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.user_id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value if isinstance(self.role, Role) else self.role,
            "phone": self.phone,
            "department": self.department,
            "active": self.active,
            "created_by": self.created_by,
            "updated_by": self.updated_by,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


@dataclass(frozen=True)
class NewUser:
    """Create request, before validation."""

    name: Optional[str]
    email: Optional[str]
    role: Optional[str]
    phone: Optional[str] = None
    department: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "NewUser":
        return cls(
            name=payload.get("name"),
            email=payload.get("email"),
            role=payload.get("role"),
            phone=payload.get("phone"),
            department=payload.get("department"),
        )


@dataclass(frozen=True)
class UserUpdate:
    """Partial update request. ``None`` means "leave unchanged"."""

    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    phone: Optional[str] = None
    department: Optional[str] = None
    active: Optional[bool] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "UserUpdate":
        return cls(
            name=payload.get("name"),
            email=payload.get("email"),
            role=payload.get("role"),
            phone=payload.get("phone"),
            department=payload.get("department"),
            active=payload.get("active"),
        )
