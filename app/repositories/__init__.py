from .category_repository import CategoryRepository, Page, SQLAlchemyCategoryRepository

__all__ = [
    "CategoryRepository",
    "Page",
    "SQLAlchemyCategoryRepository",
]
