"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

from src.user_management.user_management.container import build_container
from src.user_management.user_management.database.bootstrap import ensure_demo_users
from src.user_management.user_management.search.filters import SearchCriteria


def main():
    container = build_container(storage_backend="memory", failure_rate=0.0)
    ensure_demo_users(container.user_service)

    page = container.search_service.search(SearchCriteria(role="user", active=True), page=0, size=10)
    print([u.email for u in page.items])
    print(container.analytics_service.compute().to_dict())
    print(container.export_service.export("csv").content)


if __name__ == "__main__":
    main()
