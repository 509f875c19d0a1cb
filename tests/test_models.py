import pytest
from decimal import Decimal
from app.extensions import db
from app.models.category import Category
from app.models.meal import Meal


class TestCategoryModel:
    """Test Category model"""

    def test_id_and_timestamps_generated(self, app, category):
        assert len(category.id) == 36
        assert category.created_at is not None
        assert category.updated_at is not None

    def test_meal_count(self, app, category, meal):
        """Test meal_count follows dependent meals"""
        assert category.meal_count == 1

        db.session.add(Meal(category_id=category.id, name="Fries", price=Decimal("3.00")))
        db.session.commit()

        assert category.meal_count == 2

    def test_meals_relationship(self, app, category, meal):
        assert [m.name for m in category.meals] == ["Cheeseburger"]
        assert meal.category.slug == "fast-food"

    def test_to_dict(self, app, category):
        data = category.to_dict()

        assert data["slug"] == "fast-food"
        assert data["image_url"] == "https://example.com/fast-food.jpg"
        assert isinstance(data["created_at"], str)
        assert "meal_count" not in data


class TestMealModel:
    """Test Meal model"""

    def test_to_dict_price_is_float(self, app, meal):
        assert meal.to_dict()["price"] == 8.5
