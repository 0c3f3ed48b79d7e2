import logging

from flask import Flask
from .extensions import db, migrate, ma
from .config import Config
from app.repositories import SQLAlchemyCategoryRepository
from app.services.category_service import CategoryService
from app.storage import LocalBlobStore
from app.utils.error_handlers import register_error_handlers
from app.routes import register_blueprints


def configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    app.logger.setLevel(level)
    logging.getLogger("app").setLevel(level)


def create_app(config_class=Config):

    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db)
    ma.init_app(app)

    blob_store = LocalBlobStore(app.config["UPLOAD_FOLDER"], app.config["STORAGE_URL"])
    app.extensions["category_service"] = CategoryService(
        SQLAlchemyCategoryRepository(),
        blob_store,
        per_page=app.config["CATEGORY_PER_PAGE"],
        max_image_kb=app.config["CATEGORY_IMAGE_MAX_KB"],
    )

    register_blueprints(app)
    register_error_handlers(app)

    @app.route("/health")
    def health():
        return {"status": "healthy"}, 200

    return app
