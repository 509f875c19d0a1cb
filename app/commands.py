from decimal import Decimal

from app.extensions import db
from app.models.meal import Meal
from app.services.category_service import CategoryService
from app.utils.exceptions import ConflictError

SEED_CATEGORIES = {
    "Fast Food": [
        ("Cheeseburger", Decimal("8.50"), "Beef patty with cheddar"),
        ("Fries", Decimal("3.00"), "Crispy salted fries"),
    ],
    "Desserts": [
        ("Chocolate Cake", Decimal("5.25"), "Dark chocolate sponge"),
    ],
    "Drinks": [],
}


def register_commands(app):
    """Register CLI commands"""

    @app.cli.command("init-db")
    def init_db():
        """Initialize database"""
        db.create_all()
        print('Database initialized successfully!')

    @app.cli.command("drop-db")
    def drop_db():
        """Drop all tables"""
        if input('Are you sure you want to drop all tables? (yes/no): ') == 'yes':
            db.drop_all()
            print('Database dropped successfully!')
        else:
            print('Operation cancelled')

    @app.cli.command("seed-db")
    def seed_db():
        """Create sample categories and meals"""
        for name, meals in SEED_CATEGORIES.items():
            try:
                category = CategoryService.create_category(name=name)
            except ConflictError:
                print(f'Category "{name}" already exists, skipping')
                continue

            for meal_name, price, description in meals:
                db.session.add(
                    Meal(category_id=category.id, name=meal_name, price=price, description=description)
                )
            db.session.commit()
            print(f'Created category "{name}" with {len(meals)} meals')
