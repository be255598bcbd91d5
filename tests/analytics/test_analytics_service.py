from __future__ import annotations

import random

import pytest

from src.user_management.user_management.analytics.service import (
    DateRange,
    UserAnalyticsService,
    aggregate_users,
)
from src.user_management.user_management.core.enums import Role
from src.user_management.user_management.core.exceptions import InvalidDateRangeError, NoDataForAnalyticsError
from src.user_management.user_management.users.memory_user_repository import InMemoryUserRepository
from src.user_management.user_management.users.model import User


def _user(i, role=Role.USER, department=None, active=True):
    return User(user_id=i, name=f"User {i}", email=f"u{i}@example.com", role=role, department=department, active=active)


def test_counts_percentage_and_distributions():
    users = [
        _user(1, Role.USER, "Engineering", True),
        _user(2, Role.USER, "Marketing", False),
        _user(3, Role.ADMIN, "IT", True),
        _user(4, Role.USER, "Engineering", True),
        _user(5, None, None, False),
    ]

    stats = aggregate_users(users)

    assert stats.total_users == 5
    assert stats.active_users == 3
    assert stats.inactive_users == 2
    assert stats.active_percentage == 3 / 5 * 100
    assert stats.role_distribution == {"ADMIN": 1, "USER": 3}
    assert stats.department_distribution == {"Engineering": 2, "IT": 1, "Marketing": 1}


def test_empty_collection_fails_instead_of_dividing_by_zero():
    with pytest.raises(NoDataForAnalyticsError):
        aggregate_users([])


@pytest.mark.parametrize("seed", range(10))
def test_active_percentage_is_exact(seed):
    rng = random.Random(seed)
    users = [_user(i, active=rng.random() < 0.5) for i in range(rng.randint(1, 50))]

    stats = aggregate_users(users)

    assert stats.active_percentage == stats.active_users / stats.total_users * 100


@pytest.mark.parametrize(
    "start,end",
    [("2026-13-01", None), (None, "yesterday"), ("2026/01/01", "2026-01-31"), ("2026-02-01", "2026-01-01")],
)
def test_bad_date_tokens_are_rejected(start, end):
    with pytest.raises(InvalidDateRangeError):
        DateRange.parse(start, end)


def test_valid_or_missing_dates_are_accepted():
    rng = DateRange.parse("2026-01-01", "2026-01-31")
    assert rng.start.day == 1 and rng.end.day == 31
    assert DateRange.parse(None, "") == DateRange()


def test_service_validates_dates_before_loading():
    repo = InMemoryUserRepository()
    svc = UserAnalyticsService(repo)

    with pytest.raises(InvalidDateRangeError):
        svc.compute(start_date="bad")
    with pytest.raises(NoDataForAnalyticsError):
        svc.compute()

    repo.save(User(user_id=None, name="Solo", email="solo@example.com", role=Role.ADMIN))
    assert svc.compute(start_date="2026-01-01").active_percentage == 100.0
