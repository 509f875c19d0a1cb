from .category import Category
from .meal import Meal

__all__ = [
    "Category",
    "Meal",
]
