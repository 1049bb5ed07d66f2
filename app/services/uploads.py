"""Profile photo storage on the local filesystem, addressed by generated filename."""

import base64
import logging
import shutil
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_CONTENT_TYPES = frozenset({"image/png", "image/jpg", "image/jpeg"})


@dataclass(frozen=True)
class StoredUpload:
    """A file already written to the upload directory."""

    filename: str
    content_type: str | None


class UploadStore:
    """Reads and writes files in one upload directory. Filenames are 32 hex chars, no extension."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def path_for(self, filename: str) -> Path:
        # Only bare names produced by save() are valid; reject anything with a path component.
        if not filename or Path(filename).name != filename:
            raise ValueError(f"Invalid upload filename: {filename!r}")
        return self.directory / filename

    def save(self, source: BinaryIO, content_type: str | None) -> StoredUpload:
        """Copy an uploaded stream into the directory under a fresh name."""
        self.directory.mkdir(parents=True, exist_ok=True)
        filename = uuid.uuid4().hex
        with self.path_for(filename).open("wb") as out:
            shutil.copyfileobj(source, out)
        return StoredUpload(filename=filename, content_type=content_type)

    def delete(self, filename: str) -> None:
        self.path_for(filename).unlink()

    def read_base64(self, filename: str) -> str:
        return base64.b64encode(self.path_for(filename).read_bytes()).decode("ascii")

    def clear(self) -> int:
        """Remove every entry in the directory, keeping the directory itself. Returns entries removed."""
        if not self.directory.is_dir():
            return 0
        removed = 0
        for entry in self.directory.iterdir():
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
            removed += 1
        return removed


def clear_upload_storage(store: UploadStore) -> None:
    """Best-effort cleanup run after the response is sent; failures are logged and dropped."""
    try:
        removed = store.clear()
    except OSError:
        logger.warning("Failed to clear upload directory %s", store.directory, exc_info=True)
        return
    logger.info("Cleared upload directory %s: entries_removed=%s", store.directory, removed)
