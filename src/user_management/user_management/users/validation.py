from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Optional

from ..common.validators import optional_text, require_email, require_length, require_non_empty
from ..core.constants import NAME_MAX_LENGTH, NAME_MIN_LENGTH
from ..core.enums import Role
from ..core.exceptions import DuplicateEmailError, InvalidRoleError, ValidationError
from .model import NewUser, User, UserUpdate
from .repository import UserRepository

logger = logging.getLogger(__name__)

ALLOWED_ROLES: FrozenSet[Role] = frozenset({Role.USER, Role.ADMIN})


def validate_role(value: object) -> Role:
    """Rule table check: the role must parse and be one of ``ALLOWED_ROLES``."""
    role = Role.parse(value)
    if role not in ALLOWED_ROLES:
        raise InvalidRoleError(f"Invalid role: {value!r}")
    return role


def validate_name(value: Optional[str]) -> str:
    name = require_non_empty(value, "name")
    return require_length(name, "name", NAME_MIN_LENGTH, NAME_MAX_LENGTH)


def validate_active(value: object) -> bool:
    if not isinstance(value, bool):
        raise ValidationError("active must be a boolean", details={"field": "active"})
    return value


@dataclass(frozen=True)
class ValidNewUser:
    name: str
    email: str
    role: Role
    phone: Optional[str]
    department: Optional[str]


class UserValidator:
    """Checks entity rules before a write. Never persists anything.

    The uniqueness lookup here is a fast path only: two concurrent creates can
    both pass it, and the repository's own constraint on ``save`` is what
    finally rejects the second one.
    """

    def __init__(self, users: UserRepository):
        self._users = users

    def _ensure_email_free(self, email: str, *, owner_id: Optional[int] = None) -> None:
        existing = self._users.find_by_email(email)
        if existing and existing.user_id != owner_id:
            logger.warning("Rejected duplicate email %s", email)
            raise DuplicateEmailError(f"User with email {email} already exists")

    def validate_new(self, new: NewUser) -> ValidNewUser:
        name = validate_name(new.name)
        email = require_email(new.email)
        if new.role is None or not str(new.role).strip():
            raise ValidationError("role is required", details={"field": "role"})
        role = validate_role(new.role)
        self._ensure_email_free(email)
        return ValidNewUser(
            name=name,
            email=email,
            role=role,
            phone=optional_text(new.phone),
            department=optional_text(new.department),
        )

    def validate_update(self, existing: User, changes: UserUpdate) -> dict:
        """Return the field changes to apply to ``existing``."""
        fields: dict = {}
        if changes.name is not None:
            fields["name"] = validate_name(changes.name)
        if changes.email is not None:
            email = require_email(changes.email)
            if email.lower() != (existing.email or "").lower():
                self._ensure_email_free(email, owner_id=existing.user_id)
            fields["email"] = email
        if changes.role is not None:
            fields["role"] = validate_role(changes.role)
        if changes.phone is not None:
            fields["phone"] = optional_text(changes.phone)
        if changes.department is not None:
            fields["department"] = optional_text(changes.department)
        if changes.active is not None:
            fields["active"] = validate_active(changes.active)
        return fields
