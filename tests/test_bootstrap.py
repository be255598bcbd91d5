from __future__ import annotations

from src.user_management.user_management.database.bootstrap import (
    _iter_sql_statements,
    _strip_create_db_and_use,
    ensure_demo_users,
)
from src.user_management.user_management.users.memory_user_repository import InMemoryUserRepository
from src.user_management.user_management.users.service import UserService


def test_sql_splitter_ignores_semicolons_inside_quotes():
    sql = "CREATE TABLE a (x INT); INSERT INTO a VALUES ('1;2'); \n"
    assert list(_iter_sql_statements(sql)) == ["CREATE TABLE a (x INT)", "INSERT INTO a VALUES ('1;2')"]


def test_schema_header_is_stripped():
    sql = "CREATE DATABASE IF NOT EXISTS foo;\nUSE foo;\nCREATE TABLE users (id INT);"
    assert list(_iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE users (id INT)"]


def test_demo_users_seeded_only_once():
    svc = UserService(InMemoryUserRepository())

    assert ensure_demo_users(svc) == 3
    assert ensure_demo_users(svc) == 0
    assert svc.count_users() == 3
