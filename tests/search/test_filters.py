from __future__ import annotations

import random

import pytest

from src.user_management.user_management.core.enums import Role
from src.user_management.user_management.search.filters import SearchCriteria, filter_users
from src.user_management.user_management.users.model import User

NAMES = ["Alice Johnson", "Bob Smith", "Charlie Brown", "Dana White", None]
DEPARTMENTS = ["Engineering", "Marketing", "IT", "Sales", None]
ROLES = [Role.USER, Role.ADMIN, None]


def _user(user_id, name, email, role, department=None, active=True):
    return User(user_id=user_id, name=name, email=email, role=role, department=department, active=active)


def _random_users(rng: random.Random, n: int):
    return [
        _user(
            i,
            rng.choice(NAMES),
            rng.choice([f"user{i}@example.com", f"USER{i}@Company.com", None]),
            rng.choice(ROLES),
            rng.choice(DEPARTMENTS),
            rng.choice([True, False, None]),
        )
        for i in range(n)
    ]


def _random_criteria(rng: random.Random) -> SearchCriteria:
    return SearchCriteria(
        name=rng.choice([None, "", "a", "SMITH", "brown", "zzz", " smith", "  "]),
        email=rng.choice([None, "", "example", "COMPANY", "user1", " "]),
        role=rng.choice([None, "", "user", "ADMIN", "Admin"]),
        department=rng.choice([None, "", "eng", "IT", "sal", " it"]),
        active=rng.choice([None, True, False]),
    )


def _reference_match(user: User, c: SearchCriteria) -> bool:
    def contains(needle, value):
        if not needle:
            return True
        return value is not None and needle.lower() in value.lower()

    role_ok = not c.role or (user.role is not None and user.role.value.lower() == c.role.lower())
    active_ok = c.active is None or user.active == c.active
    return (
        contains(c.name, user.name)
        and contains(c.email, user.email)
        and role_ok
        and contains(c.department, user.department)
        and active_ok
    )


def test_role_and_active_example_preserves_order():
    users = [
        _user(1, "Alice Johnson", "alice@example.com", Role.USER),
        _user(2, "Charlie Brown", "charlie@example.com", Role.ADMIN),
        _user(3, "Bob Smith", "bob@example.com", Role.USER),
    ]

    result = filter_users(users, SearchCriteria(role="user", active=True))

    assert [u.user_id for u in result] == [1, 3]


def test_no_criteria_returns_everything():
    users = _random_users(random.Random(1), 20)
    assert filter_users(users, SearchCriteria()) == users
    assert filter_users(users, SearchCriteria(name="", email="", role="", department="")) == users


def test_whitespace_is_part_of_the_needle():
    users = [
        _user(1, "BobSmith", "bob1@example.com", Role.USER),
        _user(2, "Bob Smith", "bob2@example.com", Role.USER),
    ]

    assert [u.user_id for u in filter_users(users, SearchCriteria(name=" smith"))] == [2]
    assert filter_users(users, SearchCriteria(email="  ")) == []


def test_null_fields_never_raise_and_never_match():
    user = _user(1, None, None, None, None, None)

    assert filter_users([user], SearchCriteria(name="a")) == []
    assert filter_users([user], SearchCriteria(email="a")) == []
    assert filter_users([user], SearchCriteria(role="USER")) == []
    assert filter_users([user], SearchCriteria(department="IT")) == []
    assert filter_users([user], SearchCriteria(active=False)) == []


def test_substring_matching_is_case_insensitive():
    users = [_user(1, "Bob Smith", "Bob.Smith@Company.com", Role.USER, "Marketing")]
    assert filter_users(users, SearchCriteria(name="SMI", email="company", department="KET")) == users


@pytest.mark.parametrize("seed", range(25))
def test_result_is_exactly_the_subset_matching_every_criterion(seed):
    rng = random.Random(seed)
    users = _random_users(rng, rng.randint(0, 40))
    criteria = _random_criteria(rng)

    expected = [u for u in users if _reference_match(u, criteria)]

    assert filter_users(users, criteria) == expected
    assert all(criteria.matches(u) for u in expected)
