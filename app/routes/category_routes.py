from flask import Blueprint, request

from app.schemas import (
    CategoryCreateSchema,
    CategoryDetailSchema,
    CategorySchema,
    CategoryUpdateSchema,
)
from app.services.category_service import CategoryService
from app.utils.exceptions import BadRequestError
from app.utils.helpers import build_meta, send_response
from app.utils.validators import category_filters, pagination_options, validate_schema

category_bp = Blueprint("categories", __name__)

category_schema = CategorySchema()
categories_schema = CategorySchema(many=True)
category_detail_schema = CategoryDetailSchema()


def _require(value, message, field):
    if not value:
        raise BadRequestError(message, field=field)
    return value


# Werkzeug ranks the static "slug" segment above the <category_id> converter,
# so this rule wins regardless of registration order.
@category_bp.route("/slug/<slug>", methods=["GET"])
def get_category_by_slug(slug):
    """Get category with its meals by slug"""
    _require(slug, "Category slug is required", "slug")
    category = CategoryService.get_category_by_slug(slug)

    return send_response(200, "Category fetched successfully", category_detail_schema.dump(category))


@category_bp.route("/<category_id>", methods=["GET"])
def get_category(category_id):
    """Get category with its meals by ID"""
    _require(category_id, "Category ID is required", "id")
    category = CategoryService.get_category_by_id(category_id)

    return send_response(200, "Category fetched successfully", category_detail_schema.dump(category))


@category_bp.route("", methods=["GET"])
@category_bp.route("/", methods=["GET"])
def get_categories():
    """Get all categories with pagination and filters"""
    options = pagination_options(request.args)
    categories, total = CategoryService.get_all_categories(
        category_filters(request.args),
        skip=options["skip"],
        limit=options["limit"],
    )

    return send_response(
        200,
        "Categories fetched successfully",
        categories_schema.dump(categories),
        meta=build_meta(options["page"], options["limit"], total),
    )


@category_bp.route("/create-category", methods=["POST"])
@validate_schema(CategoryCreateSchema)
def create_category():
    data = request.validated_data
    category = CategoryService.create_category(**data)

    return send_response(201, "Category created successfully", category_schema.dump(category))


@category_bp.route("/<category_id>", methods=["PATCH"])
@validate_schema(CategoryUpdateSchema)
def update_category(category_id):
    _require(category_id, "Category ID is required", "id")
    category = CategoryService.update_category(category_id, **request.validated_data)

    return send_response(200, "Category updated successfully", category_schema.dump(category))


@category_bp.route("/<category_id>", methods=["DELETE"])
def delete_category(category_id):
    _require(category_id, "Category ID is required", "id")
    CategoryService.delete_category(category_id)

    return send_response(200, "Category deleted successfully", None)


@category_bp.route("/bulk-delete", methods=["POST"])
def bulk_delete_categories():
    body = request.get_json(force=True, silent=True) or {}
    ids = body.get("ids") if isinstance(body, dict) else None

    if not isinstance(ids, list) or not ids or not all(isinstance(i, str) and i for i in ids):
        raise BadRequestError("Category IDs are required", field="ids")

    count = CategoryService.bulk_delete_categories(ids)

    return send_response(200, f"{count} categories deleted successfully", None)
