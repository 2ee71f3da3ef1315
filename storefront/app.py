"""
Application factory
"""

# Python Packages
from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate

# Local Imports
from .base import constants
from .config.swagger import build_api
from .config.urls import URLs
from .config.database import init_db, db
from .config.logger import setup_logging
from .config.settings import MediaConfig, DealConfig
from .vendors.aws.media_store import S3MediaStore





def create_app(overrides: dict = None, media_store = None, media_config = None, deal_config = None):
    """
    Application Factory

    Args:
        overrides (dict): Flask config values applied over the environment
        media_store: media host client, defaults to S3 built from media_config
        media_config (MediaConfig): defaults to the environment
        deal_config (DealConfig): defaults to the environment
    """

    setup_logging()

    # App Object
    app = Flask(__name__)
    app.config["DEBUG"] = constants.APP_ENV != "production"
    app.config["SECRET_KEY"] = constants.APP_SECRET_KEY

    # Initialize Database
    init_db(app, overrides)

    # Register models
    from . import models

    # Initialize Migration
    Migrate(app, db)

    # Enable CORS
    CORS(app)

    # Explicit settings + media host, read by the deal controller
    media_config = media_config or MediaConfig.from_constants()
    app.extensions["deal_config"] = deal_config or DealConfig.from_constants()
    app.extensions["media_store"] = media_store or S3MediaStore(media_config)

    # Initialize Swagger
    api = build_api(app)

    # Register Namespaces
    URLs.add_namespaces(api)

    @app.route("/health")
    def health():
        return {"status": "ok"}

    return app
