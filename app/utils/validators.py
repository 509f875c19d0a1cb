import json
from functools import wraps

from flask import request
from marshmallow import ValidationError

from app.utils.exceptions import RequestValidationError

INVALID_JSON_MESSAGE = "Invalid JSON format in request body"

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# Widest OFFSET both SQLite and PostgreSQL can bind (signed 64-bit)
MAX_SKIP = 2 ** 63 - 1
DEFAULT_SORT_BY = "created_at"


def flatten_errors(messages, path=()):
    """Turn marshmallow's nested error messages into [{field, message}]"""
    errors = []
    if isinstance(messages, dict):
        for key, value in messages.items():
            errors.extend(flatten_errors(value, path + (key,)))
    elif isinstance(messages, list):
        for message in messages:
            errors.extend(flatten_errors(message, path))
    else:
        field = ".".join(str(part) for part in path if part != "_schema")
        errors.append({"field": field, "message": messages})
    return errors


def _request_body():
    """Read the request body, unwrapping a JSON string sent as ``data``"""
    if request.form:
        body = request.form.to_dict()
    else:
        body = request.get_json(force=True, silent=True)
        if body is None:
            if request.get_data(cache=True):
                raise RequestValidationError(INVALID_JSON_MESSAGE)
            body = {}

    if isinstance(body, dict) and body.get("data"):
        raw = body["data"]
        if not isinstance(raw, str):
            raise RequestValidationError(INVALID_JSON_MESSAGE)
        try:
            body = json.loads(raw)
        except ValueError:
            raise RequestValidationError(INVALID_JSON_MESSAGE)

    return body


def validate_schema(schema_class):
    """Decorator to validate request data against schema"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            schema = schema_class()
            try:
                validated_data = schema.load(_request_body())
            except ValidationError as err:
                raise RequestValidationError(errors=flatten_errors(err.messages))
            request.validated_data = validated_data
            return f(*args, **kwargs)
        return decorated_function
    return decorator


def _to_int(value):
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None


def pagination_options(options) -> dict:
    """Normalize pagination and sorting values from query params"""
    page = _to_int(options.get("page"))
    limit = _to_int(options.get("limit"))

    page = max(1, page if page is not None else DEFAULT_PAGE)
    limit = min(MAX_LIMIT, max(1, limit if limit is not None else DEFAULT_LIMIT))
    page = min(page, MAX_SKIP // limit + 1)

    return {
        "page": page,
        "limit": limit,
        "skip": (page - 1) * limit,
        "sort_by": options.get("sortBy") or DEFAULT_SORT_BY,
        "sort_order": "asc" if options.get("sortOrder") == "asc" else "desc",
    }


def category_filters(options) -> dict:
    """Pick the supported category filters out of query params"""
    filters = {}
    search_term = (options.get("searchTerm") or "").strip()
    if search_term:
        filters["search_term"] = search_term
    return filters
