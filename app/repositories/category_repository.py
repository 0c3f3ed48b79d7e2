from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import math
from typing import List, Optional

from app.extensions import db
from app.models.category import Category


@dataclass
class Page:
    """One page of a listing plus its totals"""

    items: List = field(default_factory=list)
    total: int = 0
    page: int = 1
    per_page: int = 5

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.per_page) if self.per_page > 0 else 0


class CategoryRepository(ABC):
    """Contract for category persistence."""

    @abstractmethod
    def create(self, **fields) -> Optional[Category]:
        """Persist a new category and return it."""

    @abstractmethod
    def find(self, category_id: str) -> Optional[Category]:
        """Get a category by ID."""

    @abstractmethod
    def update(self, category: Category, **fields) -> bool:
        """Apply ``fields`` to ``category``. Returns False when nothing was written."""

    @abstractmethod
    def delete(self, category: Category) -> bool:
        """Remove ``category``. Returns False when nothing was removed."""

    @abstractmethod
    def paginate(self, search: Optional[str], page: int, per_page: int) -> Page:
        """Newest-first page of categories, optionally filtered by name."""

    @abstractmethod
    def name_exists(self, name: str, exclude_id: Optional[str] = None) -> bool:
        """Whether another category already uses ``name``."""


class SQLAlchemyCategoryRepository(CategoryRepository):
    """Category repository backed by the Flask-SQLAlchemy session"""

    def create(self, **fields) -> Optional[Category]:
        category = Category(**fields)
        return category.save()

    def find(self, category_id: str) -> Optional[Category]:
        return db.session.get(Category, category_id)

    def update(self, category: Category, **fields) -> bool:
        category.update(**fields)
        return True

    def delete(self, category: Category) -> bool:
        return category.delete()

    def paginate(self, search: Optional[str], page: int, per_page: int) -> Page:
        query = Category.query

        if search:
            query = query.filter(Category.name.icontains(search, autoescape=True))

        pagination = query.order_by(Category.created_at.desc(), Category.id.desc()).paginate(
            page=page, per_page=per_page, error_out=False
        )

        return Page(
            items=list(pagination.items),
            total=pagination.total,
            page=page,
            per_page=per_page,
        )

    def name_exists(self, name: str, exclude_id: Optional[str] = None) -> bool:
        query = Category.query.filter(Category.name == name)
        if exclude_id is not None:
            query = query.filter(Category.id != exclude_id)
        return db.session.query(query.exists()).scalar()
