"""Helpers for the JSON response shapes served by the API."""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify


def ok(data: Any, status_code: int = 200) -> Response:
    """Success response: the payload itself, no envelope."""

    return jsonify(data), status_code


def fail(message: str, status_code: int, error: Any | None = None) -> Response:
    """Error response with a human message and the underlying error text."""

    return jsonify({"message": message, "error": error}), status_code
