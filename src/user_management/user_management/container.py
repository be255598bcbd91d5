from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .analytics.service import UserAnalyticsService
from .bulk.service import BulkCreateCoordinator
from .core.constants import MAX_BULK_SIZE, SIMULATED_FAILURE_RATE
from .database.connection import DBConfig, DatabaseConnection
from .export.service import UserExportService
from .operations.failure import FailureInjector
from .operations.service import OperationDispatcher
from .search.service import UserSearchService
from .users.memory_user_repository import InMemoryUserRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository

    user_service: UserService
    search_service: UserSearchService
    analytics_service: UserAnalyticsService
    export_service: UserExportService
    operation_dispatcher: OperationDispatcher
    bulk_coordinator: BulkCreateCoordinator


def build_repository(*, storage_backend: str = "memory", db_config: Optional[dict] = None) -> UserRepository:
    backend = (storage_backend or "memory").strip().lower()
    if backend == "memory":
        return InMemoryUserRepository()
    if backend == "mysql":
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql storage backend")
        conn = DatabaseConnection(DBConfig.from_dict(db_config))
        return MySQLUserRepository(conn)
    raise ValueError(f"Unknown storage backend: {storage_backend!r}")


def build_container(
    *,
    users_repo: Optional[UserRepository] = None,
    storage_backend: str = "memory",
    db_config: Optional[dict] = None,
    failure_rate: float = SIMULATED_FAILURE_RATE,
    failures: Optional[FailureInjector] = None,
    max_bulk_size: int = MAX_BULK_SIZE,
) -> Container:
    users_repo = users_repo or build_repository(storage_backend=storage_backend, db_config=db_config)

    user_service = UserService(users_repo)
    search_service = UserSearchService(users_repo)
    analytics_service = UserAnalyticsService(users_repo)
    export_service = UserExportService(users_repo)
    operation_dispatcher = OperationDispatcher(users_repo, failures=failures or FailureInjector(failure_rate))
    bulk_coordinator = BulkCreateCoordinator(user_service, max_batch_size=max_bulk_size)

    return Container(
        users_repo=users_repo,
        user_service=user_service,
        search_service=search_service,
        analytics_service=analytics_service,
        export_service=export_service,
        operation_dispatcher=operation_dispatcher,
        bulk_coordinator=bulk_coordinator,
    )
