# worldnav/ranking/blob_store.py
"""
A single named blob on disk, written atomically.
"""
import logging
import os
import tempfile
from typing import Optional

from ..exceptions import StorageError

class JsonFileBlobStore:
    """Stores one blob as `<directory>/<key>.json`."""

    def __init__(self, directory: str, key: str = "WorldNavigationPlayers"):
        self.directory = directory
        self.key = key

    @property
    def path(self) -> str:
        return os.path.join(self.directory, f"{self.key}.json")

    def read_blob(self) -> Optional[bytes]:
        """Returns the stored bytes, or None when nothing has been written yet."""
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, 'rb') as f:
                return f.read()
        except OSError as e:
            raise StorageError(f"Could not read blob: {e}", store=self.path) from e

    def write_blob(self, data: bytes):
        """Replaces the blob; readers see either the old or the new content."""
        try:
            os.makedirs(self.directory, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f"{self.key}.", dir=self.directory)
        except OSError as e:
            raise StorageError(f"Could not prepare blob write: {e}", store=self.path) from e

        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            raise StorageError(f"Could not write blob: {e}", store=self.path) from e
        finally:
            if os.path.exists(tmp_name):
                try:
                    os.remove(tmp_name)
                except OSError:
                    logging.debug(f"Could not remove temp file {tmp_name}", exc_info=True)
