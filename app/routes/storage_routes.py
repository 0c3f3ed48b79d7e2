from flask import Blueprint, current_app, send_from_directory

storage_bp = Blueprint("storage", __name__)


@storage_bp.route("/<collection>/<path:filename>", methods=["GET"])
def get_file(collection, filename):
    """Serve a stored upload"""
    return send_from_directory(current_app.config["UPLOAD_FOLDER"], f"{collection}/{filename}")
