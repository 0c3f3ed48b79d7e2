import pytest
from marshmallow import ValidationError

from app.schemas import CategoryCreateSchema, CategorySchema, CategoryUpdateSchema
from tests.fakes import (
    JPEG_BYTES,
    FakeCategory,
    InMemoryBlobStore,
    InMemoryCategoryRepository,
    image_upload,
)


@pytest.fixture
def repository():
    repository = InMemoryCategoryRepository()
    repository.create(name="Electronics", slug="electronics")
    return repository


class TestCategoryCreateSchema:
    """Test create input validation"""

    def test_load_name_only(self, repository):
        """Test image defaults to None"""
        data = CategoryCreateSchema(repository).load({"name": "Books"})

        assert data == {"name": "Books", "image": None}

    def test_strips_name(self, repository):
        """Test surrounding whitespace is removed"""
        data = CategoryCreateSchema(repository).load({"name": "  Books "})

        assert data["name"] == "Books"

    def test_unknown_fields_excluded(self, repository):
        """Test extra form fields are ignored"""
        data = CategoryCreateSchema(repository).load({"name": "Books", "_method": "POST"})

        assert "_method" not in data

    def test_name_too_long(self, repository):
        """Test name length limit"""
        with pytest.raises(ValidationError) as exc:
            CategoryCreateSchema(repository).load({"name": "x" * 256})

        assert exc.value.messages == {
            "name": ["The name must not be greater than 255 characters."]
        }

    def test_name_taken_is_case_sensitive(self, repository):
        """Test uniqueness compares names exactly"""
        data = CategoryCreateSchema(repository).load({"name": "electronics"})

        assert data["name"] == "electronics"

    def test_jpeg_accepted(self, repository):
        """Test jpeg upload passes"""
        upload = image_upload("photo.jpeg", JPEG_BYTES, "image/jpeg")

        data = CategoryCreateSchema(repository).load({"name": "Books", "image": upload})

        assert data["image"] is upload
        assert upload.stream.tell() == 0

    def test_empty_file_input_ignored(self, repository):
        """Test file input without a filename counts as no image"""
        upload = image_upload("", b"", "application/octet-stream")

        data = CategoryCreateSchema(repository).load({"name": "Books", "image": upload})

        assert data["image"] is None

    def test_wrong_mimetype(self, repository):
        """Test declared content type must be jpeg or png"""
        upload = image_upload("photo.png", content_type="application/pdf")

        with pytest.raises(ValidationError) as exc:
            CategoryCreateSchema(repository).load({"name": "Books", "image": upload})

        assert exc.value.messages == {
            "image": ["The image must be a file of type: jpeg, jpg, png."]
        }

    def test_image_not_a_file(self, repository):
        """Test plain string is rejected as image"""
        with pytest.raises(ValidationError) as exc:
            CategoryCreateSchema(repository).load({"name": "Books", "image": "photo.png"})

        assert exc.value.messages == {"image": ["The image must be a file."]}

    def test_collects_all_field_errors(self, repository):
        """Test name and image errors are reported together"""
        upload = image_upload("notes.txt", b"text", "text/plain")

        with pytest.raises(ValidationError) as exc:
            CategoryCreateSchema(repository).load({"name": "Electronics", "image": upload})

        assert set(exc.value.messages) == {"name", "image"}


class TestCategoryUpdateSchema:
    """Test update input validation"""

    def test_excludes_current_record(self, repository):
        """Test the record being updated may keep its name"""
        current = next(iter(repository.rows.values()))

        data = CategoryUpdateSchema(repository, exclude_id=current.id).load(
            {"name": "Electronics"}
        )

        assert data["name"] == "Electronics"

    def test_image_not_validated(self, repository):
        """Test replacement files are passed through"""
        upload = image_upload("notes.txt", b"text", "text/plain")

        data = CategoryUpdateSchema(repository).load({"name": "Docs", "image": upload})

        assert data["image"] is upload

    def test_non_file_image_ignored(self, repository):
        """Test a plain value in place of a file counts as no upload"""
        data = CategoryUpdateSchema(repository).load({"name": "Docs", "image": "keep"})

        assert data["image"] is None


class TestCategorySchema:
    """Test output serialization"""

    def test_dump(self):
        """Test serialized fields"""
        category = FakeCategory(name="Phones", slug="phones", image="abc.png")

        data = CategorySchema(blob_store=InMemoryBlobStore()).dump(category)

        assert data["name"] == "Phones"
        assert data["slug"] == "phones"
        assert data["image"] == "abc.png"
        assert data["image_url"] == "/storage/categories/abc.png"
        assert data["created_at"].startswith("2025-01-01")

    def test_dump_without_image(self):
        """Test image_url is null when there is no image"""
        category = FakeCategory(name="Phones", slug="phones")

        data = CategorySchema(blob_store=InMemoryBlobStore()).dump(category)

        assert data["image"] is None
        assert data["image_url"] is None
