from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.store_guard import store_guard
from ..core.constants import SYSTEM_ACTOR
from ..core.exceptions import UserNotFoundError, ValidationError
from .model import NewUser, User, UserUpdate
from .repository import UserRepository
from .validation import UserValidator, validate_role

logger = logging.getLogger(__name__)


class UserService:
    """Use case: manage user records.

    Every public method runs its repository calls inside ``store_guard`` so
    callers only ever see ``DomainError`` subclasses.
    """

    def __init__(
        self,
        users: UserRepository,
        *,
        validator: Optional[UserValidator] = None,
        clock: Callable = now_local,
    ):
        self._users = users
        self._validator = validator or UserValidator(users)
        self._clock = clock

    def _require(self, user_id: int) -> User:
        user = self._users.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(f"User not found with id: {user_id}")
        return user

    def list_users(self) -> Sequence[User]:
        logger.debug("Fetching all users")
        with store_guard(logger, "fetching all users"):
            return list(self._users.find_all())

    def get_user(self, user_id: int) -> User:
        logger.debug("Fetching user by id: %s", user_id)
        with store_guard(logger, "fetching user"):
            return self._require(user_id)

    def get_user_by_email(self, email: str) -> User:
        if not email or not email.strip():
            raise ValidationError("email is required", details={"field": "email"})
        logger.debug("Fetching user by email: %s", email)
        with store_guard(logger, "fetching user by email"):
            user = self._users.find_by_email(email.strip())
        if not user:
            raise UserNotFoundError(f"User not found with email: {email}")
        return user

    def list_by_role(self, role: str) -> Sequence[User]:
        parsed = validate_role(role)
        logger.debug("Fetching users by role: %s", parsed.value)
        with store_guard(logger, "fetching users by role"):
            return list(self._users.find_by_role(parsed))

    def count_users(self) -> int:
        with store_guard(logger, "counting users"):
            return int(self._users.count())

    def create_user(self, new: NewUser) -> User:
        logger.info("Creating new user: %s", new.email)
        with store_guard(logger, "creating user"):
            valid = self._validator.validate_new(new)
            now = self._clock()
            saved = self._users.save(
                User(
                    user_id=None,
                    name=valid.name,
                    email=valid.email,
                    role=valid.role,
                    phone=valid.phone,
                    department=valid.department,
                    active=True,
                    created_by=SYSTEM_ACTOR,
                    updated_by=SYSTEM_ACTOR,
                    created_at=now,
                    updated_at=now,
                )
            )
        logger.info("Successfully created user with id: %s", saved.user_id)
        return saved

    def update_user(self, user_id: int, changes: UserUpdate) -> User:
        logger.info("Updating user with id: %s", user_id)
        with store_guard(logger, "updating user"):
            existing = self._require(user_id)
            fields = self._validator.validate_update(existing, changes)
            updated = self._users.save(existing.touched(self._clock(), **fields))
        logger.info("Successfully updated user with id: %s", user_id)
        return updated

    def delete_user(self, user_id: int) -> None:
        logger.info("Deleting user with id: %s", user_id)
        with store_guard(logger, "deleting user"):
            self._require(user_id)
            if not self._users.delete_by_id(user_id):
                raise UserNotFoundError(f"User not found with id: {user_id}")
        logger.info("Successfully deleted user with id: %s", user_id)

    def activate_user(self, user_id: int) -> User:
        return self._set_active(user_id, True)

    def deactivate_user(self, user_id: int) -> User:
        return self._set_active(user_id, False)

    def _set_active(self, user_id: int, active: bool) -> User:
        logger.info("%s user with id: %s", "Activating" if active else "Deactivating", user_id)
        with store_guard(logger, "changing user status"):
            user = self._require(user_id)
            return self._users.save(user.touched(self._clock(), active=active))
