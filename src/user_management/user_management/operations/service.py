from __future__ import annotations

import logging
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..common.store_guard import store_guard
from ..core.enums import UserOperation
from ..core.exceptions import SimulatedTransientFailure, UserNotFoundError
from ..users.model import User
from ..users.repository import UserRepository
from .factory import OperationHandlerFactory
from .failure import FailureInjector

logger = logging.getLogger(__name__)


class OperationDispatcher:
    """Applies a named state transition to one user.

    After the transition a simulated transient failure may be injected. When
    it fires the new state is dropped before anything is written, so callers
    can safely retry.
    """

    def __init__(
        self,
        users: UserRepository,
        *,
        failures: Optional[FailureInjector] = None,
        factory: Optional[OperationHandlerFactory] = None,
        clock: Callable = now_local,
    ):
        self._users = users
        self._failures = failures or FailureInjector()
        self._factory = factory or OperationHandlerFactory()
        self._clock = clock

    def apply(self, user_id: int, operation: object) -> User:
        op = UserOperation.parse(operation)
        logger.info("Performing operation '%s' on user: %s", op.value, user_id)

        with store_guard(logger, "loading user for operation"):
            user = self._users.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(f"User not found with id: {user_id}")

        transitioned = self._factory.for_operation(op).apply(user, now=self._clock())

        if self._failures.should_fail():
            logger.warning("Simulated failure injected for operation '%s' on user %s", op.value, user_id)
            raise SimulatedTransientFailure("Simulated operation failure for testing error handling")

        if transitioned is user:
            logger.debug("Operation '%s' is a no-op for user %s", op.value, user_id)
            return user

        with store_guard(logger, "saving user after operation"):
            return self._users.save(transitioned)
