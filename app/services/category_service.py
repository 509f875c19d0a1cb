import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from app.extensions import db
from app.models.category import Category
from app.models.meal import Meal
from app.utils.exceptions import BadRequestError, ConflictError, NotFoundError
from app.utils.helpers import UNSLUGGABLE_NAME_MESSAGE, generate_slug

logger = logging.getLogger(__name__)


class CategoryService:
    """Category service handling category operations"""

    @staticmethod
    def _slug_for(name: str) -> str:
        slug = generate_slug(name)
        if not slug:
            raise BadRequestError(UNSLUGGABLE_NAME_MESSAGE, field="name")
        return slug

    @staticmethod
    def _commit(conflict_message: str):
        """Commit, reporting a slug race lost to another writer as a conflict"""
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise ConflictError(conflict_message, field="name")

    @staticmethod
    def _lock_categories(category_ids: list) -> list:
        """SELECT ... FOR UPDATE the given category rows, returning the ids found.

        Inserting a meal takes a key-share lock on its category row, so holding
        these locks keeps new meals out until the current transaction ends.
        """
        return (
            db.session.execute(
                select(Category.id).where(Category.id.in_(category_ids)).with_for_update()
            )
            .scalars()
            .all()
        )

    @staticmethod
    def create_category(name: str, image_url: str = None) -> Category:
        """Create new category"""
        slug = CategoryService._slug_for(name)

        if Category.query.filter_by(slug=slug).first():
            raise ConflictError("Category already exists", field="name")

        category = Category(name=name, slug=slug, image_url=image_url)

        db.session.add(category)
        CategoryService._commit("Category already exists")

        logger.info(f"Created category {category.id} ({slug})")
        return category

    @staticmethod
    def get_all_categories(filters: dict, skip: int = 0, limit: int = None):
        """Search categories ordered by name.

        Returns ``(categories, total)``. The page rows and the total of the
        whole filtered set come from the same statement, with one exception:
        a page past the end carries no row to read the total from, so a
        separate count runs. Under READ COMMITTED that count may observe
        writes committed after the row query.
        """
        query = Category.query

        search_term = filters.get("search_term")
        if search_term:
            query = query.filter(Category.name.icontains(search_term, autoescape=True))

        page_query = (
            query.add_columns(func.count().over().label("total"))
            .order_by(Category.name.asc(), Category.id.asc())
            .offset(skip)
        )
        if limit is not None:
            page_query = page_query.limit(limit)

        rows = page_query.all()
        if rows:
            total = rows[0].total
        elif skip == 0 and limit != 0:
            total = 0
        else:
            total = query.count()

        return [row[0] for row in rows], total

    @staticmethod
    def get_category_by_id(category_id: str) -> Category:
        """Get category by ID"""
        category = db.session.get(Category, category_id)
        if not category:
            raise NotFoundError("Category not found", field="id")
        return category

    @staticmethod
    def get_category_by_slug(slug: str) -> Category:
        """Get category by slug"""
        category = Category.query.filter_by(slug=slug).first()
        if not category:
            raise NotFoundError("Category not found", field="slug")
        return category

    @staticmethod
    def update_category(category_id: str, **kwargs) -> Category:
        """Update category"""
        category = db.session.get(Category, category_id)
        if not category:
            raise NotFoundError("Category not found", field="id")

        # Update slug if name changed
        name = kwargs.get("name")
        if name is not None and name != category.name:
            slug = CategoryService._slug_for(name)
            duplicate = Category.query.filter(
                Category.slug == slug, Category.id != category_id
            ).first()
            if duplicate:
                raise ConflictError("Category name already exists", field="name")
            kwargs["slug"] = slug

        category.update(**kwargs)
        CategoryService._commit("Category name already exists")

        logger.info(f"Updated category {category_id}: {sorted(kwargs)}")
        return category

    @staticmethod
    def delete_category(category_id: str) -> dict:
        """Delete category, refusing while any meal references it"""
        if not CategoryService._lock_categories([category_id]):
            db.session.rollback()
            raise NotFoundError("Category not found", field="id")

        category = db.session.get(Category, category_id, populate_existing=True)

        if category.meal_count > 0:
            db.session.rollback()
            logger.warning(
                f"Refused to delete category {category_id}: {category.meal_count} meals attached"
            )
            raise BadRequestError("Cannot delete category with meals", field="id")

        deleted = category.to_dict()
        db.session.delete(category)
        db.session.commit()

        logger.info(f"Deleted category {category_id}")
        return deleted

    @staticmethod
    def bulk_delete_categories(category_ids: list) -> int:
        """Delete all given categories or none of them.

        Returns the number of rows removed; ids that do not exist are ignored.
        """
        category_ids = list(dict.fromkeys(category_ids))
        if not category_ids:
            raise BadRequestError("Category IDs are required", field="ids")

        CategoryService._lock_categories(category_ids)

        with_meals = (
            db.session.execute(
                select(Meal.category_id)
                .where(Meal.category_id.in_(category_ids))
                .distinct()
            )
            .scalars()
            .all()
        )
        if with_meals:
            db.session.rollback()
            logger.warning(f"Refused bulk delete: categories {with_meals} have meals")
            raise BadRequestError("Cannot delete categories with meals", field="ids")

        count = Category.query.filter(Category.id.in_(category_ids)).delete()
        db.session.commit()

        logger.info(f"Bulk deleted {count} categories")
        return count
