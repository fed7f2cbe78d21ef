"""Blueprint registration helper."""

from __future__ import annotations

from flask import Flask

from .auth import bp as auth_bp
from .pages import bp as pages_bp


def register_routes(app: Flask) -> None:
    """Register all application blueprints on the provided Flask app."""
    app.register_blueprint(auth_bp)
    app.register_blueprint(pages_bp)
