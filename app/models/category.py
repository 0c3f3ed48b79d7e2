from app.models.base import BaseModel
from app.extensions import db


class Category(BaseModel):
    """Category model"""
    __tablename__ = 'categories'

    name = db.Column(db.String(255), unique=True, nullable=False, index=True)
    slug = db.Column(db.String(255), nullable=False, index=True)
    # Generated filename inside the "categories" blob collection
    image = db.Column(db.String(255), nullable=True)

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
