"""Flask application setup and blueprint wiring."""

from __future__ import annotations

import os
import time
from typing import Any, Mapping, Optional

from flask import Flask, g, session
from pymongo.errors import PyMongoError

from jorge.routes import register_routes
from jorge.utils.i18n import label

DATABASE_ERROR_MESSAGE = "Ooops...database error"


def register_request_hooks(app: Flask) -> None:
    """Time each request and mark every response as non-cacheable."""

    @app.before_request
    def _start_timer() -> None:
        g.request_started = time.perf_counter()

    @app.after_request
    def _finish_response(response):
        response.headers["Cache-Control"] = "no-cache"
        response.headers["Pragma"] = "no-cache"
        started = g.get("request_started")
        if started is not None:
            app.logger.debug(f"Rendered in {time.perf_counter() - started:.4f}s")
        return response

    @app.errorhandler(PyMongoError)
    def _database_error(error):
        app.logger.error(f"Archive database lookup failed: {error}", exc_info=error)
        return DATABASE_ERROR_MESSAGE, 500

    @app.context_processor
    def _template_helpers():
        return {
            "label": label,
            "language": session.get("language", app.config["DEFAULT_LANGUAGE"]),
        }


def create_app(config_overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Configure and return the Flask application instance."""
    app = Flask(__name__)

    app.config.update(
        SECRET_KEY=os.getenv("JORGE_SECRET_KEY", "dev-secret-key"),
        ADMIN_NAME=os.getenv("JORGE_ADMIN_NAME", "admin"),
        XMPP_HOST=os.getenv("JORGE_XMPP_HOST", "localhost"),
        DEFAULT_LANGUAGE=os.getenv("JORGE_DEFAULT_LANGUAGE", "pol"),
        SEARCH_PAGE_SIZE=int(os.getenv("JORGE_SEARCH_PAGE_SIZE", "20")),
    )
    if config_overrides:
        app.config.update(config_overrides)

    if app.config["SECRET_KEY"] == "dev-secret-key":
        app.logger.warning("JORGE_SECRET_KEY is not set, sessions use the development key")

    register_request_hooks(app)
    register_routes(app)

    return app


app = create_app()
