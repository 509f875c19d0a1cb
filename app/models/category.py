from app.models.base import BaseModel
from app.extensions import db


class Category(BaseModel):
    """Category model"""
    __tablename__ = 'categories'

    name = db.Column(db.String(50), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    image_url = db.Column(db.String(500), nullable=True)

    # Relationships
    meals = db.relationship('Meal', backref='category', lazy='dynamic', passive_deletes='all')

    def __repr__(self):
        return f"<Category {self.slug}>"
