import logging
from abc import ABC, abstractmethod
from pathlib import Path

from app.utils.helpers import hash_name

logger = logging.getLogger(__name__)


class BlobStore(ABC):
    """Contract for storing uploaded files by generated name."""

    @abstractmethod
    def store(self, file, collection: str) -> str:
        """Save ``file`` under a generated name and return that name."""

    @abstractmethod
    def delete(self, name: str, collection: str) -> bool:
        """Remove a stored file. Missing files are not an error."""

    @abstractmethod
    def url(self, name: str, collection: str) -> str:
        """Public URL of a stored file."""


class LocalBlobStore(BlobStore):
    """Stores blobs on the local filesystem under ``root/<collection>/``."""

    def __init__(self, root, base_url: str = "/storage"):
        """
        Args:
            root: Base directory for stored files
            base_url: URL prefix the files are served from
        """
        self.root = Path(root)
        self.base_url = base_url.rstrip("/")

    def path_for(self, name: str, collection: str) -> Path:
        return self.root / collection / name

    def store(self, file, collection: str) -> str:
        """
        Save an uploaded file (werkzeug ``FileStorage``) with a hashed name.

        Returns:
            The generated filename, without the collection prefix
        """
        folder = self.root / collection
        folder.mkdir(parents=True, exist_ok=True)

        name = hash_name(file.filename)
        file.save(str(folder / name))

        logger.debug(f"Stored blob {collection}/{name}")
        return name

    def delete(self, name: str, collection: str) -> bool:
        if not name:
            return False

        file_path = self.path_for(name, collection)
        try:
            if file_path.is_file():
                file_path.unlink()
                logger.debug(f"Deleted blob {collection}/{name}")
                return True
            return False
        except OSError as e:
            logger.warning(f"Failed to delete blob {collection}/{name}: {e}")
            return False

    def url(self, name: str, collection: str) -> str:
        return f"{self.base_url}/{collection}/{name}"
