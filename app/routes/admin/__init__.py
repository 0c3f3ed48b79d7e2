from flask import Blueprint
from .category_routes import category_admin_bp

admin_bp = Blueprint("admin", __name__, url_prefix="/admin")

admin_bp.register_blueprint(category_admin_bp, url_prefix="/categories")
