from app.routes.admin import admin_bp
from app.routes.storage_routes import storage_bp


def register_blueprints(app):
    """Register all blueprints"""
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(storage_bp, url_prefix='/storage')
