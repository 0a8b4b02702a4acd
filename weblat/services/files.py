"""
File Store

Writes uploaded files into the upload directory under the name the client
sent. Names are neither sanitized nor de-duplicated: a second upload with
the same name overwrites the first file and yields the same locator.
"""

import logging
import os
import shutil

from weblat.errors import FileStoreError

logger = logging.getLogger(__name__)

LOCATOR_PREFIX = 'uploads/'


class FileStore:
    """Persists upload streams under ``upload_dir``."""

    def __init__(self, upload_dir):
        self.upload_dir = upload_dir

    def locator_for(self, filename):
        return LOCATOR_PREFIX + filename

    def path_for(self, locator):
        """Resolve a locator back to the file it names."""
        filename = locator[len(LOCATOR_PREFIX):] if locator.startswith(LOCATOR_PREFIX) else locator
        return os.path.join(self.upload_dir, filename)

    def save_upload(self, original_filename, stream):
        """Copy ``stream`` verbatim to disk and return its locator."""
        locator = self.locator_for(original_filename)
        path = self.path_for(locator)
        try:
            os.makedirs(self.upload_dir, exist_ok=True)
            with open(path, 'wb') as out:
                shutil.copyfileobj(stream, out)
        except OSError as exc:
            raise FileStoreError(f'could not write {path}: {exc}') from exc
        logger.info('Stored upload %s at %s', original_filename, path)
        return locator
