"""
Web API server — Flask app factory.

Serves the JSON API that browser clients use to create structures.
The app holds the template catalog and the base directory; each request
gets its own filesystem provider.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask

from treesmith.core.data import TemplateCatalog, default_catalog

logger = logging.getLogger(__name__)


def create_app(
    base_dir: Path | None = None,
    catalog: TemplateCatalog | None = None,
    mock_mode: bool = False,
) -> Flask:
    """Create and configure the Flask application.

    Args:
        base_dir: Directory relative plan paths are created under.
        catalog: Template catalog to serve (default: bundled catalog).
        mock_mode: Record provider calls instead of touching disk.

    Returns:
        Configured Flask application.
    """
    app = Flask(__name__)

    app.config["BASE_DIR"] = str(base_dir or Path.cwd())
    app.config["CATALOG"] = catalog or default_catalog()
    app.config["MOCK_MODE"] = mock_mode
    app.config["MAX_CONTENT_LENGTH"] = 2 * 1024 * 1024  # structures are small

    from treesmith.ui.web.routes_api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    logger.info(
        "Web API app created (base_dir=%s, templates=%d, mock=%s)",
        app.config["BASE_DIR"], len(app.config["CATALOG"]), mock_mode,
    )
    return app


def run_server(
    app: Flask,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
) -> None:
    """Run the Flask development server."""
    logger.info("Starting web API on %s:%d", host, port)
    app.run(host=host, port=port, debug=debug, use_reloader=False)
