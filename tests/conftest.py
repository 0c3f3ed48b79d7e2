import pytest

from app import create_app, db
from app.config import TestingConfig
from app.models.category import Category
from tests.fakes import PNG_BYTES


@pytest.fixture(scope="function")
def app(tmp_path):
    """Create application for testing"""

    class Config(TestingConfig):
        UPLOAD_FOLDER = str(tmp_path / "storage")

    app = create_app(Config)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Test client"""
    return app.test_client()


@pytest.fixture
def service(app):
    """Category service wired by the app factory"""
    return app.extensions["category_service"]


@pytest.fixture
def upload_folder(app, tmp_path):
    return tmp_path / "storage"


# Data fixtures
@pytest.fixture
def category(app):
    """Create a test category"""
    category = Category(name="Electronics", slug="electronics")
    db.session.add(category)
    db.session.commit()
    return category


@pytest.fixture
def category_with_image(app, upload_folder):
    """Create a test category with a stored image"""
    folder = upload_folder / "categories"
    folder.mkdir(parents=True, exist_ok=True)
    (folder / "old-image.png").write_bytes(PNG_BYTES)

    category = Category(name="Books", slug="books", image="old-image.png")
    db.session.add(category)
    db.session.commit()
    return category
