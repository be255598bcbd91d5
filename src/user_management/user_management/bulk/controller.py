from __future__ import annotations

from flask import Flask

from ..common.request_args import json_array
from ..common.responses import api_response
from ..container import Container
from ..core.exceptions import ValidationError
from ..users.model import NewUser


def register(app: Flask, container: Container) -> None:
    base = app.config["API_BASE_PATH"]

    @app.route(f"{base}/users/bulk", methods=["POST"], endpoint="bulk_create_users")
    def bulk_create_users():
        items = json_array()
        container.bulk_coordinator.check_batch_size(len(items))
        if any(not isinstance(item, dict) for item in items):
            raise ValidationError("Every batch item must be a JSON object")

        result = container.bulk_coordinator.create_all([NewUser.from_payload(item) for item in items])
        message = f"Created {result.success_count} users, {result.failure_count} failed"
        return api_response(result.to_dict(), message, 201)
