from __future__ import annotations

import logging

from flask import Flask, request

from ..common.request_args import json_object
from ..common.responses import api_response
from ..container import Container
from .model import NewUser, UserUpdate

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    base = app.config["API_BASE_PATH"]
    users = container.user_service

    @app.route(f"{base}/users", methods=["GET"], endpoint="list_users")
    def list_users():
        return api_response([u.to_dict() for u in users.list_users()], "Users retrieved")

    @app.route(f"{base}/users/error", methods=["GET"], endpoint="trigger_user_error")
    def trigger_user_error():
        logger.info("Triggering a deliberate error for verification")
        raise RuntimeError("Deliberate error for error-handling verification")

    @app.route(f"{base}/users/<int:user_id>", methods=["GET"], endpoint="get_user")
    def get_user(user_id: int):
        return api_response(users.get_user(user_id).to_dict(), "User retrieved")

    @app.route(f"{base}/users/by-email", methods=["GET"], endpoint="get_user_by_email")
    def get_user_by_email():
        user = users.get_user_by_email(request.args.get("email", ""))
        return api_response(user.to_dict(), "User retrieved")

    @app.route(f"{base}/users/by-role", methods=["GET"], endpoint="list_users_by_role")
    def list_users_by_role():
        found = users.list_by_role(request.args.get("role", ""))
        return api_response([u.to_dict() for u in found], "Users retrieved")

    @app.route(f"{base}/users/count", methods=["GET"], endpoint="count_users")
    def count_users():
        return api_response({"count": users.count_users()}, "User count retrieved")

    @app.route(f"{base}/users", methods=["POST"], endpoint="create_user")
    def create_user():
        created = users.create_user(NewUser.from_payload(json_object()))
        return api_response(created.to_dict(), "User created successfully", 201)

    @app.route(f"{base}/users/<int:user_id>", methods=["PUT"], endpoint="update_user")
    def update_user(user_id: int):
        updated = users.update_user(user_id, UserUpdate.from_payload(json_object()))
        return api_response(updated.to_dict(), "User updated successfully")

    @app.route(f"{base}/users/<int:user_id>", methods=["DELETE"], endpoint="delete_user")
    def delete_user(user_id: int):
        users.delete_user(user_id)
        return api_response(None, "User deleted successfully")

    @app.route(f"{base}/users/<int:user_id>/activate", methods=["PATCH"], endpoint="activate_user")
    def activate_user(user_id: int):
        return api_response(users.activate_user(user_id).to_dict(), "User activated")

    @app.route(f"{base}/users/<int:user_id>/deactivate", methods=["PATCH"], endpoint="deactivate_user")
    def deactivate_user(user_id: int):
        return api_response(users.deactivate_user(user_id).to_dict(), "User deactivated")
