from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import UserOperation
from .handlers.base import OperationHandler
from .handlers.demote_handler import DemoteToUserHandler
from .handlers.promote_handler import PromoteToAdminHandler
from .handlers.reset_handler import ResetAccountHandler


@dataclass
class OperationHandlerFactory:
    """Factory Pattern: one handler per ``UserOperation`` variant."""

    def for_operation(self, operation: UserOperation) -> OperationHandler:
        if operation == UserOperation.PROMOTE_TO_ADMIN:
            return PromoteToAdminHandler()
        if operation == UserOperation.DEMOTE_TO_USER:
            return DemoteToUserHandler()
        if operation == UserOperation.RESET_ACCOUNT:
            return ResetAccountHandler()
        raise ValueError(f"No handler registered for {operation!r}")
