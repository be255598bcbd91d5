from __future__ import annotations

from flask import Flask, request

from ..common.request_args import bool_arg, int_arg
from ..common.responses import api_response
from ..container import Container
from .filters import SearchCriteria


def register(app: Flask, container: Container) -> None:
    base = app.config["API_BASE_PATH"]
    default_size = int(app.config.get("DEFAULT_PAGE_SIZE", 10))

    @app.route(f"{base}/users/search", methods=["GET"], endpoint="search_users")
    def search_users():
        criteria = SearchCriteria(
            name=request.args.get("name"),
            email=request.args.get("email"),
            role=request.args.get("role"),
            department=request.args.get("department"),
            active=bool_arg("active"),
        )
        page = container.search_service.search(
            criteria,
            page=int_arg("page", 0),
            size=int_arg("size", default_size),
        )
        return api_response(page.to_dict(lambda u: u.to_dict()), f"Found {page.total_elements} users")
