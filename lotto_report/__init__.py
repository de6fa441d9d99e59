"""Flask application package."""

from __future__ import annotations

import random
from typing import Any

from flask import Flask

try:
    from dotenv import load_dotenv
except Exception:  # pragma: no cover
    load_dotenv = None  # type: ignore[assignment]


def create_app(config_overrides: dict[str, Any] | None = None) -> Flask:
    """Application factory.

    Loads the draw history (synchronously, or on a background thread when
    HISTORY_ASYNC_LOAD is set) and the stored bookmarks once at startup.

    Args:
        config_overrides: values applied on top of the environment config.

    Returns:
        Configured Flask application.
    """
    if load_dotenv is not None:
        load_dotenv()

    from lotto_report.config import get_config
    from lotto_report.db import init_db
    from lotto_report.error_handlers import register_error_handlers
    from lotto_report.logging_config import configure_logging
    from lotto_report.repositories.bookmark_repository import BookmarkRepository
    from lotto_report.repositories.history_repository import HistoryStore
    from lotto_report.routes.analysis import analysis_bp
    from lotto_report.routes.bookmarks import bookmarks_bp
    from lotto_report.routes.draws import draws_bp
    from lotto_report.routes.generate import generate_bp
    from lotto_report.routes.health import health_bp
    from lotto_report.services.bookmark_service import BookmarkService
    from lotto_report.services.combination_generator import CombinationGenerator
    from lotto_report.services.generation_service import GenerationService
    from lotto_report.utils.http import build_http_session

    app = Flask(__name__)
    app.config.from_object(get_config())
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app)
    session_factory = init_db(app)
    register_error_handlers(app)

    history_store = HistoryStore(
        str(app.config["HISTORY_SOURCE"]),
        http=build_http_session(
            retries=int(app.config["HTTP_RETRIES"]),
            backoff_factor=float(app.config["HTTP_BACKOFF"]),
        ),
        timeout_seconds=float(app.config["HTTP_TIMEOUT_SECONDS"]),
    )
    if app.config.get("HISTORY_ASYNC_LOAD"):
        history_store.load_in_background()
    else:
        history_store.load()

    bookmark_service = BookmarkService(
        BookmarkRepository(session_factory, key=str(app.config["BOOKMARKS_KEY"]))
    )
    bookmark_service.load()

    seed = app.config.get("GENERATE_SEED")
    generator = CombinationGenerator(
        rng=random.Random(seed) if seed is not None else None,
        max_attempts=int(app.config["GENERATE_MAX_ATTEMPTS"]),
    )

    app.extensions["history_store"] = history_store
    app.extensions["bookmark_service"] = bookmark_service
    app.extensions["generation_service"] = GenerationService(generator)

    app.register_blueprint(health_bp)
    app.register_blueprint(draws_bp)
    app.register_blueprint(analysis_bp)
    app.register_blueprint(generate_bp)
    app.register_blueprint(bookmarks_bp, url_prefix="/api")

    return app
