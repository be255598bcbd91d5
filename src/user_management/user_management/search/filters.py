"""Multi-criteria user filtering.

Each supplied criterion becomes one predicate; a user matches when every
predicate accepts it. Criteria that are ``None`` or ``""`` are simply not
turned into predicates, so they can never reject a record. A missing value
on the record side is treated as "no match", never as an error.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from ..core.enums import Role
from ..users.model import User

Predicate = Callable[[User], bool]


def _blank(value: Optional[str]) -> bool:
    return value is None or value == ""


def contains_ci(getter: Callable[[User], Optional[str]], needle: str) -> Predicate:
    needle = needle.lower()

    def predicate(user: User) -> bool:
        value = getter(user)
        return value is not None and needle in str(value).lower()

    return predicate


def equals_ci(getter: Callable[[User], Optional[str]], expected: str) -> Predicate:
    expected = expected.lower()

    def predicate(user: User) -> bool:
        value = getter(user)
        return value is not None and str(value).lower() == expected

    return predicate


def equals(getter: Callable[[User], object], expected: object) -> Predicate:
    def predicate(user: User) -> bool:
        value = getter(user)
        return value is not None and value == expected

    return predicate


def _role_value(user: User) -> Optional[str]:
    role = user.role
    if role is None:
        return None
    return role.value if isinstance(role, Role) else str(role)


@dataclass(frozen=True)
class SearchCriteria:
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    department: Optional[str] = None
    active: Optional[bool] = None

    def predicates(self) -> List[Predicate]:
        out: List[Predicate] = []
        if not _blank(self.name):
            out.append(contains_ci(lambda u: u.name, self.name))
        if not _blank(self.email):
            out.append(contains_ci(lambda u: u.email, self.email))
        if not _blank(self.role):
            out.append(equals_ci(_role_value, self.role))
        if not _blank(self.department):
            out.append(contains_ci(lambda u: u.department, self.department))
        if self.active is not None:
            out.append(equals(lambda u: u.active, self.active))
        return out

    def matches(self, user: User) -> bool:
        return all(p(user) for p in self.predicates())


def filter_users(users: Iterable[User], criteria: SearchCriteria) -> List[User]:
    """Return the users matching every supplied criterion, in input order."""
    predicates = criteria.predicates()
    return [u for u in users if all(p(u) for p in predicates)]
