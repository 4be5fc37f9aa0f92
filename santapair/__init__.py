from __future__ import annotations

import logging
import os

from flask import Flask

from .exceptions import ConfigurationError
from .extensions import db, migrate, csrf
from .services.participants import SqlParticipantStore
from .views.public import public_bp
from .views.people import people_bp


def _log_level(value) -> int:
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError("SANTAPAIR_LOG_LEVEL", value)
    return level


def _rng_seed(value) -> int | None:
    # Unset means a fresh, unseeded generator per draw
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError("SANTAPAIR_RNG_SEED", value) from e


def create_app(config: dict | None = None) -> Flask:
    app = Flask(__name__)

    app.config["SECRET_KEY"] = os.environ.get("SECRET_KEY", "dev-secret-change-me")
    app.config["SQLALCHEMY_DATABASE_URI"] = os.environ.get("DATABASE_URL", "sqlite:///santapair.db")
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["SANTAPAIR_LOG_LEVEL"] = os.environ.get("SANTAPAIR_LOG_LEVEL", "INFO")
    app.config["SANTAPAIR_RNG_SEED"] = os.environ.get("SANTAPAIR_RNG_SEED")

    if config:
        app.config.update(config)

    app.config["SANTAPAIR_LOG_LEVEL"] = _log_level(app.config["SANTAPAIR_LOG_LEVEL"])
    app.config["SANTAPAIR_RNG_SEED"] = _rng_seed(app.config["SANTAPAIR_RNG_SEED"])

    logging.getLogger(__name__).setLevel(app.config["SANTAPAIR_LOG_LEVEL"])

    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    # Swap in another ParticipantStore through config (tests use the in-memory one)
    app.extensions["santapair.store"] = app.config.get("PARTICIPANT_STORE") or SqlParticipantStore()

    with app.app_context():
        db.create_all()

    # Blueprints
    app.register_blueprint(public_bp)
    app.register_blueprint(people_bp)

    return app
