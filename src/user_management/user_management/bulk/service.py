from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..core.constants import MAX_BULK_SIZE
from ..core.exceptions import BatchTooLargeError, DomainError
from ..users.model import NewUser, User
from ..users.service import UserService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BulkItemFailure:
    index: int
    email: Optional[str]
    code: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"index": self.index, "email": self.email, "code": self.code, "message": self.message}


@dataclass
class BulkCreateResult:
    created: List[User] = field(default_factory=list)
    failures: List[BulkItemFailure] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.created)

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "created": [u.to_dict() for u in self.created],
            "success_count": self.success_count,
            "failure_count": self.failure_count,
            "failures": [f.to_dict() for f in self.failures],
        }


class BulkCreateCoordinator:
    """Creates a batch of users with partial-failure semantics.

    An oversized batch is rejected before any item runs (``BatchTooLargeError``).
    Otherwise every item goes through the normal create path on its own and a
    failing item is recorded in the result instead of stopping the batch.
    """

    def __init__(self, user_service: UserService, *, max_batch_size: int = MAX_BULK_SIZE):
        self._user_service = user_service
        self._max_batch_size = int(max_batch_size)

    def check_batch_size(self, submitted: int) -> None:
        if submitted > self._max_batch_size:
            raise BatchTooLargeError(
                f"Batch of {submitted} exceeds the limit of {self._max_batch_size}",
                details={"limit": self._max_batch_size, "submitted": submitted},
            )

    def create_all(self, requests: Sequence[NewUser]) -> BulkCreateResult:
        self.check_batch_size(len(requests))

        result = BulkCreateResult()
        for index, new in enumerate(requests):
            try:
                result.created.append(self._user_service.create_user(new))
            except DomainError as e:
                result.failures.append(BulkItemFailure(index=index, email=new.email, code=e.code, message=e.message))

        logger.info(
            "Bulk create finished: %s created, %s failed", result.success_count, result.failure_count
        )
        return result
