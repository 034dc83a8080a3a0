"""Application factory and app-wide configuration."""

#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app compound_calc.app run --port 5000 --debug

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from compound_calc.app.api.routes import api_bp
from compound_calc.app.cli import project_command
from compound_calc.app.config import Config


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(Config)
    app.config.from_prefixed_env("COMPOUND_CALC")
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("compound_calc").setLevel(app.config["LOG_LEVEL"])
    app.logger.setLevel(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    app.cli.add_command(project_command)
    return app
