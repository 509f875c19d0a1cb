from marshmallow import EXCLUDE, ValidationError, fields, validate

from app.extensions import ma
from app.models.meal import Meal
from app.utils.helpers import UNSLUGGABLE_NAME_MESSAGE, generate_slug

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50


class TrimmedString(fields.String):
    """String field that strips surrounding whitespace before validation"""

    def _deserialize(self, value, attr, data, **kwargs):
        return super()._deserialize(value, attr, data, **kwargs).strip()


def _has_slug(value):
    if not generate_slug(value):
        raise ValidationError(UNSLUGGABLE_NAME_MESSAGE)


def _name_field(**kwargs):
    return TrimmedString(
        validate=[
            validate.Length(
                min=NAME_MIN_LENGTH,
                error=f"Category name must be at least {NAME_MIN_LENGTH} characters",
            ),
            validate.Length(
                max=NAME_MAX_LENGTH,
                error=f"Category name cannot exceed {NAME_MAX_LENGTH} characters",
            ),
            _has_slug,
        ],
        error_messages={
            "required": "Category name is required",
            "null": "Category name must be a string",
            "invalid": "Category name must be a string",
        },
        **kwargs,
    )


def _image_url_field(field_class=fields.String):
    return field_class(
        data_key="imageUrl",
        attribute="image_url",
        allow_none=True,
        validate=validate.URL(error="Invalid image URL format"),
        error_messages={"invalid": "Image URL must be a string"},
    )


class CategoryCreateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    name = _name_field(required=True)
    image_url = _image_url_field()


class CategoryUpdateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    name = _name_field()
    image_url = _image_url_field(TrimmedString)


class MealSummarySchema(ma.Schema):
    id = fields.Str()
    name = fields.Str()
    price = fields.Float()
    description = fields.Str(allow_none=True)
    image_url = fields.Str(data_key="imageUrl", allow_none=True)


class CategorySchema(ma.Schema):
    id = fields.Str()
    name = fields.Str()
    slug = fields.Str()
    image_url = fields.Str(data_key="imageUrl", allow_none=True)
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")
    count = fields.Function(lambda category: {"meals": category.meal_count}, data_key="_count")


class CategoryDetailSchema(ma.Schema):
    id = fields.Str()
    name = fields.Str()
    slug = fields.Str()
    image_url = fields.Str(data_key="imageUrl", allow_none=True)
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")
    meals = fields.Method("get_meals")

    def get_meals(self, category):
        return MealSummarySchema(many=True).dump(category.meals.order_by(Meal.name))
