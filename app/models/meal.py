from sqlalchemy import func, select
from sqlalchemy.orm import column_property

from app.models.base import BaseModel
from app.models.category import Category
from app.extensions import db


class Meal(BaseModel):
    __tablename__ = "meals"

    category_id = db.Column(
        db.String(36),
        db.ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    name = db.Column(db.String(255), nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    description = db.Column(db.Text)
    image_url = db.Column(db.String(500))

    def to_dict(self):
        data = super().to_dict()
        data["price"] = float(self.price)
        return data


# Dependent-meal count, loaded with every Category row
Category.meal_count = column_property(
    select(func.count(Meal.id))
    .where(Meal.category_id == Category.id)
    .correlate_except(Meal)
    .scalar_subquery()
)
