from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ...users.model import User


class OperationHandler(ABC):
    """Strategy Pattern: one state transition per operation.

    ``apply`` returns the user unchanged (same object) when the transition is
    a no-op, otherwise a new instance with refreshed audit fields.
    """

    @abstractmethod
    def apply(self, user: User, *, now: datetime) -> User:
        raise NotImplementedError
