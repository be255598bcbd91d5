from __future__ import annotations

from typing import Any

from flask import jsonify


def api_response(data: Any = None, message: str = "", status: int = 200, *, success: bool = True):
    """Uniform JSON envelope: ``{"success", "data", "message"}``."""
    return jsonify({"success": success, "data": data, "message": message}), status


def api_error(message: str, status: int, data: Any = None):
    return api_response(data, message, status, success=False)
