"""Application factory and app-wide configuration."""

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from investcalc.app.api.routes import api_bp
from investcalc.config import DEFAULTS, ENV_PREFIX, configure_logging


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)

    app.config.from_mapping(DEFAULTS)
    # INVESTCALC_MAX_YEARS=50, INVESTCALC_CORS_ORIGINS='["https://example.com"]', ...
    app.config.from_prefixed_env(ENV_PREFIX)
    if config:
        app.config.from_mapping(config)

    configure_logging(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": list(app.config["CORS_ORIGINS"])}},
        supports_credentials=True,
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
