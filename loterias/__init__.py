"""Flask application package."""

from __future__ import annotations

from dotenv import load_dotenv
from flask import Flask

from loterias.config import BaseConfig


def create_app(config: BaseConfig | None = None) -> Flask:
    """Application factory.

    Args:
        config: Explicit configuration; read from the environment when omitted.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from loterias.config import get_config
    from loterias.db import init_db
    from loterias.error_handlers import register_error_handlers
    from loterias.logging_config import configure_logging
    from loterias.routes.health import health_bp
    from loterias.routes.results import results_bp
    from loterias.routes.web import web_bp

    app = Flask(__name__, static_folder="public", static_url_path="")
    app.config.from_object(config or get_config())
    app.json.sort_keys = False  # keep Titulo, Hora, Dia, Resultados order

    configure_logging(str(app.config.get("LOG_LEVEL", "INFO")))
    init_db(app)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(results_bp)

    return app
