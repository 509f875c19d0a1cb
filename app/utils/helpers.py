import math

from flask import jsonify
from slugify import slugify as python_slugify

UNSLUGGABLE_NAME_MESSAGE = "Category name must contain at least one letter or number"


def generate_slug(name: str) -> str:
    """Generate URL-friendly slug"""
    return python_slugify(name)


def build_meta(page: int, limit: int, total: int) -> dict:
    """Pagination metadata for list endpoints"""
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "totalPage": math.ceil(total / limit) if limit else 0,
    }


def send_response(status_code: int, message: str = None, data=None, meta: dict = None, success: bool = True):
    """Wrap a payload in the response envelope.

    ``meta`` is extended with ``hasNextPage``/``hasPrevPage`` and only
    included in the body when given.
    """
    body = {
        "success": success,
        "statusCode": status_code,
        "message": message or "Operation successful!",
    }
    if meta is not None:
        body["meta"] = {
            **meta,
            "hasNextPage": meta["page"] < meta["totalPage"],
            "hasPrevPage": meta["page"] > 1,
        }
    body["data"] = data
    return jsonify(body), status_code
