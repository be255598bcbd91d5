from __future__ import annotations

import logging

from flask import Flask
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError
from .responses import api_error

logger = logging.getLogger(__name__)


def register(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(error: DomainError):
        if error.status_code >= 500:
            logger.error("%s: %s", type(error).__name__, error.message)
        return api_error(error.message, error.status_code, data=error.to_dict())

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return api_error(error.description or error.name, error.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(error: Exception):
        logger.exception("Unhandled error")
        if bool(app.config.get("DEBUG", False)):
            return api_error(f"Internal error: {error}", 500)
        return api_error("Internal server error", 500)
