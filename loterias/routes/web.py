"""Web page routes."""

from __future__ import annotations

from flask import Blueprint, current_app


web_bp = Blueprint("web", __name__)


@web_bp.get("/")
def index():
    # Other files in public/ are served by Flask's static route at "/".
    return current_app.send_static_file("index.html")
