"""Centralized error handlers."""

from __future__ import annotations

import logging

from flask import Flask
from werkzeug.exceptions import HTTPException

from loterias.errors import AppError
from loterias.utils.responses import fail

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    """Register error handlers for the Flask app."""

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s (%s)", exc.message, exc.details)
        return fail(exc.message, exc.status_code, exc.details)

    @app.errorhandler(HTTPException)
    def _handle_http_exception(exc: HTTPException):
        status = int(getattr(exc, "code", 500) or 500)
        if status == 404:
            return fail("Not found", 404, getattr(exc, "name", "Not Found"))

        return fail(
            getattr(exc, "description", "HTTP error"),
            status,
            getattr(exc, "name", "HTTPException"),
        )

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.exception("Unhandled exception")
        return fail("Internal server error", 500, str(exc))
