from __future__ import annotations

import threading

import pytest

from src.user_management.user_management.core.enums import Role
from src.user_management.user_management.core.exceptions import DuplicateEmailError
from src.user_management.user_management.users.memory_user_repository import InMemoryUserRepository
from src.user_management.user_management.users.model import User


def _user(email: str, role: Role = Role.USER) -> User:
    return User(user_id=None, name="Some One", email=email, role=role)


def test_save_assigns_sequential_ids_and_keeps_order():
    repo = InMemoryUserRepository()
    a = repo.save(_user("a@example.com"))
    b = repo.save(_user("b@example.com", Role.ADMIN))

    assert (a.user_id, b.user_id) == (1, 2)
    assert [u.email for u in repo.find_all()] == ["a@example.com", "b@example.com"]
    assert [u.user_id for u in repo.find_by_role(Role.ADMIN)] == [2]
    assert repo.count() == 2


def test_save_enforces_email_uniqueness():
    repo = InMemoryUserRepository()
    repo.save(_user("a@example.com"))
    with pytest.raises(DuplicateEmailError):
        repo.save(_user("A@EXAMPLE.com"))


def test_concurrent_saves_with_same_email_store_only_one():
    repo = InMemoryUserRepository()
    errors = []

    def worker():
        try:
            repo.save(_user("race@example.com"))
        except DuplicateEmailError as e:
            errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert repo.count() == 1
    assert len(errors) == 7


def test_delete_by_id_reports_whether_something_was_removed():
    repo = InMemoryUserRepository()
    saved = repo.save(_user("a@example.com"))

    assert repo.delete_by_id(saved.user_id) is True
    assert repo.delete_by_id(saved.user_id) is False
    assert repo.find_by_id(saved.user_id) is None
