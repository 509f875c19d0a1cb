from .category_schema import (
    CategoryCreateSchema,
    CategoryUpdateSchema,
    CategorySchema,
    CategoryDetailSchema,
    MealSummarySchema,
)

__all__ = [
    "CategoryCreateSchema",
    "CategoryUpdateSchema",
    "CategorySchema",
    "CategoryDetailSchema",
    "MealSummarySchema",
]
