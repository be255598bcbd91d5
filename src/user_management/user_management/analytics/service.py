from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.store_guard import store_guard
from ..core.enums import Role
from ..core.exceptions import InvalidDateRangeError, NoDataForAnalyticsError
from ..users.model import User
from ..users.repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateRange:
    start: Optional[date] = None
    end: Optional[date] = None

    @classmethod
    def parse(cls, start: Optional[str], end: Optional[str]) -> "DateRange":
        """Validate optional YYYY-MM-DD tokens. The range is not used to filter."""

        def _one(value: Optional[str], label: str) -> Optional[date]:
            if value is None or not value.strip():
                return None
            try:
                return parse_iso_date(value.strip())
            except ValueError:
                raise InvalidDateRangeError(f"Invalid {label}: {value!r} (expected YYYY-MM-DD)")

        rng = cls(start=_one(start, "startDate"), end=_one(end, "endDate"))
        if rng.start and rng.end and rng.start > rng.end:
            raise InvalidDateRangeError("startDate must not be after endDate")
        return rng


@dataclass(frozen=True)
class UserStatistics:
    total_users: int
    active_users: int
    inactive_users: int
    active_percentage: float
    role_distribution: Dict[str, int]
    department_distribution: Dict[str, int]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_users": self.total_users,
            "active_users": self.active_users,
            "inactive_users": self.inactive_users,
            "active_percentage": self.active_percentage,
            "role_distribution": dict(self.role_distribution),
            "department_distribution": dict(self.department_distribution),
        }


def _role_key(user: User) -> Optional[str]:
    if user.role is None:
        return None
    return user.role.value if isinstance(user.role, Role) else str(user.role)


def aggregate_users(users: Iterable[User]) -> UserStatistics:
    users = list(users)
    total = len(users)
    if total == 0:
        raise NoDataForAnalyticsError("No users available for analytics")

    active = sum(1 for u in users if u.active is True)
    roles = Counter(k for k in (_role_key(u) for u in users) if k)
    departments = Counter(u.department for u in users if u.department)

    return UserStatistics(
        total_users=total,
        active_users=active,
        inactive_users=total - active,
        active_percentage=active / total * 100,
        role_distribution=dict(sorted(roles.items())),
        department_distribution=dict(sorted(departments.items())),
    )


class UserAnalyticsService:
    def __init__(self, users: UserRepository):
        self._users = users

    def compute(self, *, start_date: Optional[str] = None, end_date: Optional[str] = None) -> UserStatistics:
        DateRange.parse(start_date, end_date)
        with store_guard(logger, "loading users for analytics"):
            users = list(self._users.find_all())
        stats = aggregate_users(users)
        logger.debug("Analytics computed over %s users", stats.total_users)
        return stats
