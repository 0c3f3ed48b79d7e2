from flask import Blueprint, current_app, jsonify, request
from app.utils.validators import request_data, validate_page

category_admin_bp = Blueprint("categories", __name__)


def category_service():
    return current_app.extensions["category_service"]


@category_admin_bp.route("/", methods=["GET"])
def get_categories():
    """Get categories, optionally searched by name"""
    search = request.args.get("q")
    page = validate_page()

    result = category_service().list_categories(search=search, page=page)
    return jsonify(result), 200


@category_admin_bp.route("/", methods=["POST"])
def create_category():
    """Create category"""
    result = category_service().create_category(request_data())
    return jsonify(result), 201 if result["success"] else 200


@category_admin_bp.route("/<category_id>", methods=["GET"])
def get_category(category_id):
    """Get category detail"""
    result = category_service().get_category(category_id)
    return jsonify(result), 200


@category_admin_bp.route("/<category_id>", methods=["PUT", "PATCH"])
def update_category(category_id):
    """Update category"""
    result = category_service().update_category(category_id, request_data())
    return jsonify(result), 200


@category_admin_bp.route("/<category_id>", methods=["DELETE"])
def delete_category(category_id):
    """Delete category"""
    result = category_service().delete_category(category_id)
    return jsonify(result), 200
