import logging

from flask import Flask
from .extensions import db, migrate, ma
from .config import Config
from app.utils.error_handlers import register_error_handlers
from app.routes import register_blueprints
from app.commands import register_commands

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def create_app(config_class=Config):

    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.sort_keys = False

    logging.basicConfig(level=app.config["LOG_LEVEL"], format=LOG_FORMAT)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    db.init_app(app)
    migrate.init_app(app, db)
    ma.init_app(app)

    # Models must be imported before create_all / migrations see the metadata
    from app import models  # noqa: F401

    register_blueprints(app)
    register_error_handlers(app)
    register_commands(app)

    @app.route("/health")
    def health():
        return {"status": "healthy"}, 200

    return app
