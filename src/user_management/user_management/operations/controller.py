from __future__ import annotations

from flask import Flask, request

from ..common.responses import api_response
from ..container import Container
from ..core.exceptions import ValidationError


def _operation_token():
    # Query string and JSON body are both accepted; they must agree when both are sent.
    body = request.get_json(silent=True)
    from_body = body.get("operation") if isinstance(body, dict) else None
    from_query = request.args.get("operation")
    if from_query and from_body and str(from_query).strip().lower() != str(from_body).strip().lower():
        raise ValidationError(
            "Conflicting operation values in query string and body",
            details={"query": from_query, "body": from_body},
        )
    return from_query or from_body


def register(app: Flask, container: Container) -> None:
    base = app.config["API_BASE_PATH"]

    @app.route(f"{base}/users/<int:user_id>/operations", methods=["POST"], endpoint="apply_user_operation")
    def apply_user_operation(user_id: int):
        user = container.operation_dispatcher.apply(user_id, _operation_token())
        return api_response(user.to_dict(), "Operation applied")
