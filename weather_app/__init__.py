from __future__ import annotations

from flask import Flask, request, send_from_directory

from .config import Config
from .errors import register_error_handlers
from .schemas import HealthStatus
from .timestamps import utc_timestamp
from .weather import weather_bp


def create_app(config_class: type[Config] = Config) -> Flask:
    """Application factory used by both CLI and WSGI entry points."""

    app = Flask(__name__, static_folder="static", static_url_path="")
    app.config.from_object(config_class)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    _register_hooks(app)
    _register_blueprints(app)
    _register_routes(app)
    register_error_handlers(app)

    return app


def _register_hooks(app: Flask) -> None:
    @app.after_request
    def set_security_headers(response):
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        if request.path.startswith("/api/") or response.mimetype == "application/json":
            response.headers.setdefault("Cache-Control", "no-store")
        return response


def _register_blueprints(app: Flask) -> None:
    app.register_blueprint(weather_bp, url_prefix="/api/weather")


def _register_routes(app: Flask) -> None:
    @app.route("/")
    def index():
        return send_from_directory(app.static_folder, "index.html")

    @app.route("/health")
    def health():
        return HealthStatus(timestamp=utc_timestamp()).model_dump()
