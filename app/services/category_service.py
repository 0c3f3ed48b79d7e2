import logging
import os

from werkzeug.exceptions import NotFound

from app.repositories import CategoryRepository
from app.schemas import CategoryCreateSchema, CategorySchema, CategoryUpdateSchema
from app.storage import BlobStore
from app.utils.helpers import slugify
from app.utils.responses import envelope

logger = logging.getLogger(__name__)

IMAGE_COLLECTION = "categories"


class CategoryNotFound(NotFound):
    description = "Category not found"


class CategoryService:
    """Category service handling category operations

    Every operation returns an envelope dict. Invalid input raises
    ``marshmallow.ValidationError`` before anything is written.
    """

    def __init__(
        self,
        repository: CategoryRepository,
        blob_store: BlobStore,
        per_page: int = 5,
        max_image_kb: int = 2000,
    ):
        self.repository = repository
        self.blob_store = blob_store
        self.per_page = per_page
        self.max_image_kb = max_image_kb

    def serialize(self, category) -> dict:
        return CategorySchema(blob_store=self.blob_store, collection=IMAGE_COLLECTION).dump(category)

    def list_categories(self, search: str = None, page: int = 1) -> dict:
        """Search categories by name, newest first"""
        page = max(page or 1, 1)
        result = self.repository.paginate(search or None, page, self.per_page)

        return envelope(
            True,
            "List Data Categories",
            {
                "items": [self.serialize(c) for c in result.items],
                "total": result.total,
                "page": result.page,
                "per_page": result.per_page,
                "pages": result.pages,
            },
        )

    def create_category(self, data: dict) -> dict:
        """Create new category"""
        schema = CategoryCreateSchema(self.repository, max_image_kb=self.max_image_kb)
        validated = schema.load(data)

        image = validated.get("image")
        image_name = self.blob_store.store(image, IMAGE_COLLECTION) if image else None

        category = self.repository.create(
            name=validated["name"],
            slug=slugify(validated["name"]),
            image=image_name,
        )

        if category:
            logger.info(f"Created category {category.id} ({category.name})")
            return envelope(True, "Category saved successfully!", self.serialize(category))

        logger.warning(f"Category {validated['name']!r} was not persisted")
        return envelope(False, "Failed to save category!", None)

    def get_category(self, category_id: str) -> dict:
        """Get category detail"""
        category = self.repository.find(category_id)

        if category:
            return envelope(True, "Category detail!", self.serialize(category))

        return envelope(False, "Category not found!", None)

    def update_category(self, category_id: str, data: dict) -> dict:
        """Update category name and, when a file is given, its image"""
        category = self._find_or_404(category_id)

        schema = CategoryUpdateSchema(self.repository, exclude_id=category.id)
        validated = schema.load(data)

        name = validated["name"]
        slug = slugify(name)
        image = validated.get("image")

        updated = True
        if image:
            self.blob_store.delete(os.path.basename(category.image or ""), IMAGE_COLLECTION)
            image_name = self.blob_store.store(image, IMAGE_COLLECTION)
            updated = self.repository.update(category, image=image_name, name=name, slug=slug)

        # Reapplied unconditionally; a no-op after the image branch
        updated = self.repository.update(category, name=name, slug=slug) and updated

        if updated:
            logger.info(f"Updated category {category.id} ({category.name})")
            return envelope(True, "Category updated successfully!", self.serialize(category))

        logger.warning(f"Category {category.id} was not updated")
        return envelope(False, "Failed to update category!", None)

    def delete_category(self, category_id: str) -> dict:
        """Delete category and its stored image"""
        category = self._find_or_404(category_id)

        self.blob_store.delete(os.path.basename(category.image or ""), IMAGE_COLLECTION)

        if self.repository.delete(category):
            logger.info(f"Deleted category {category_id}")
            return envelope(True, "Category deleted successfully!", None)

        logger.warning(f"Category {category_id} was not deleted")
        return envelope(False, "Failed to delete category!", None)

    def _find_or_404(self, category_id: str):
        category = self.repository.find(category_id)
        if not category:
            raise CategoryNotFound()
        return category
