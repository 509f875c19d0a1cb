import pytest
from app import create_app, db
from app.config import TestingConfig
from app.models.category import Category
from app.models.meal import Meal
from decimal import Decimal


@pytest.fixture(scope="function")
def app():
    """Create application for testing"""
    app = create_app(TestingConfig)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Test client"""
    return app.test_client()


@pytest.fixture
def runner(app):
    """Test CLI runner"""
    return app.test_cli_runner()


# Data fixtures
@pytest.fixture
def category(app):
    """Create a test category"""
    category = Category(
        name="Fast Food",
        slug="fast-food",
        image_url="https://example.com/fast-food.jpg",
    )
    db.session.add(category)
    db.session.commit()
    return category


@pytest.fixture
def other_category(app):
    """Create a second category without meals"""
    category = Category(name="Desserts", slug="desserts")
    db.session.add(category)
    db.session.commit()
    return category


@pytest.fixture
def meal(app, category):
    """Create a meal in the test category"""
    meal = Meal(
        category_id=category.id,
        name="Cheeseburger",
        price=Decimal("8.50"),
        description="Beef patty with cheddar",
        image_url="https://example.com/cheeseburger.jpg",
    )
    db.session.add(meal)
    db.session.commit()
    return meal
