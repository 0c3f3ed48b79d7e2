from .category_schema import (
    CategoryCreateSchema,
    CategorySchema,
    CategoryUpdateSchema,
    ImageFile,
    UploadedFile,
)
