from __future__ import annotations

from flask import Flask, request

from ..common.responses import api_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    base = app.config["API_BASE_PATH"]

    @app.route(f"{base}/users/analytics", methods=["GET"], endpoint="user_analytics")
    def user_analytics():
        stats = container.analytics_service.compute(
            start_date=request.args.get("startDate"),
            end_date=request.args.get("endDate"),
        )
        return api_response(stats.to_dict(), "Analytics computed")
