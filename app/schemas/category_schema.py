from marshmallow import EXCLUDE, Schema, ValidationError, fields, pre_load, validate, validates
from werkzeug.datastructures import FileStorage

from app.extensions import ma
from app.utils.helpers import allowed_file, sniff_image_type, stream_size

ALLOWED_IMAGE_EXTENSIONS = {"jpeg", "jpg", "png"}
ALLOWED_IMAGE_MIMETYPES = {"image/jpeg", "image/jpg", "image/png"}
DEFAULT_IMAGE_MAX_KB = 2000

NAME_ERRORS = {
    "required": "The name field is required.",
    "null": "The name field is required.",
    "invalid": "The name must be a string.",
}


class ImageFile(fields.Field):
    """Uploaded jpeg/png file no larger than ``max_kb`` kilobytes"""

    def __init__(self, max_kb=DEFAULT_IMAGE_MAX_KB, **kwargs):
        super().__init__(**kwargs)
        self.max_kb = max_kb

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, FileStorage):
            raise ValidationError("The image must be a file.")

        if sniff_image_type(value.stream) is None:
            raise ValidationError("The image must be an image.")

        if (
            not allowed_file(value.filename, ALLOWED_IMAGE_EXTENSIONS)
            or value.mimetype not in ALLOWED_IMAGE_MIMETYPES
        ):
            raise ValidationError("The image must be a file of type: jpeg, jpg, png.")

        if stream_size(value.stream) > self.max_kb * 1024:
            raise ValidationError(
                f"The image must not be greater than {self.max_kb} kilobytes."
            )

        return value


class _CategoryInputSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(
        required=True,
        validate=[
            validate.Length(min=1, error="The name field is required."),
            validate.Length(max=255, error="The name must not be greater than 255 characters."),
        ],
        error_messages=NAME_ERRORS,
    )

    def __init__(self, repository, exclude_id=None, **kwargs):
        super().__init__(**kwargs)
        self.repository = repository
        self.exclude_id = exclude_id

    @pre_load
    def normalize(self, data, **kwargs):
        data = dict(data)
        if isinstance(data.get("name"), str):
            data["name"] = data["name"].strip()
        # Empty file inputs arrive without a filename
        if not data.get("image"):
            data.pop("image", None)
        return data

    @validates("name")
    def validate_unique_name(self, value, **kwargs):
        if self.repository.name_exists(value, exclude_id=self.exclude_id):
            raise ValidationError("The name has already been taken.")


class CategoryCreateSchema(_CategoryInputSchema):
    image = ImageFile(load_default=None)

    def __init__(self, repository, max_image_kb=DEFAULT_IMAGE_MAX_KB, **kwargs):
        super().__init__(repository, **kwargs)
        self.fields["image"].max_kb = max_image_kb


class UploadedFile(fields.Field):
    """Any uploaded file; values that are not files count as no upload"""

    def _deserialize(self, value, attr, data, **kwargs):
        return value if isinstance(value, FileStorage) else None


class CategoryUpdateSchema(_CategoryInputSchema):
    # Replacement images are not checked on update
    image = UploadedFile(load_default=None)


class CategorySchema(ma.Schema):
    id = fields.Str()
    name = fields.Str()
    slug = fields.Str()
    image = fields.Str(allow_none=True)
    image_url = fields.Method("get_image_url")
    created_at = fields.DateTime()
    updated_at = fields.DateTime()

    def __init__(self, blob_store=None, collection="categories", **kwargs):
        super().__init__(**kwargs)
        self.blob_store = blob_store
        self.collection = collection

    def get_image_url(self, category):
        if not category.image or self.blob_store is None:
            return None
        return self.blob_store.url(category.image, self.collection)
