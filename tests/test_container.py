from __future__ import annotations

import pytest

from src.user_management.user_management.container import build_repository
from src.user_management.user_management.users.memory_user_repository import InMemoryUserRepository
from src.user_management.user_management.users.mysql_user_repository import MySQLUserRepository


def test_each_mysql_repository_keeps_its_own_db_config():
    first = build_repository(storage_backend="mysql", db_config={"host": "db-a", "database": "users_a"})
    second = build_repository(storage_backend="mysql", db_config={"host": "db-b", "database": "users_b"})

    assert isinstance(first, MySQLUserRepository)
    assert first._conn_factory.config.host == "db-a"
    assert second._conn_factory.config.host == "db-b"
    assert second._conn_factory.config.database == "users_b"


def test_memory_backend_and_unknown_backend():
    assert isinstance(build_repository(storage_backend=" Memory "), InMemoryUserRepository)

    with pytest.raises(ValueError):
        build_repository(storage_backend="redis")

    with pytest.raises(ValueError):
        build_repository(storage_backend="mysql", db_config={})
