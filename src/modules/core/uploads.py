"""Image upload storage.

Uploads go through Django's ``default_storage`` so the backend
(local filesystem, S3, ...) is a settings concern.  The returned value is
the storage-relative path that gets persisted on the owning record.
"""

from __future__ import annotations

import os
import uuid

import structlog
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import UploadedFile
from django.utils.text import get_valid_filename

from modules.core.exceptions import InvalidImage

logger = structlog.get_logger(__name__)

ALLOWED_IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".gif", ".webp"})


def validate_image(upload: UploadedFile | None) -> None:
    """Raise ``InvalidImage`` unless ``upload`` is an accepted image file."""
    if upload is None:
        raise InvalidImage("No image file provided")
    extension = os.path.splitext(upload.name or "")[1].lower()
    if extension not in ALLOWED_IMAGE_EXTENSIONS:
        raise InvalidImage(f"Unsupported image type '{extension or upload.name}'")


def store_image(upload: UploadedFile, folder: str) -> str:
    """Save ``upload`` under ``folder`` and return its stored path."""
    validate_image(upload)
    filename = get_valid_filename(os.path.basename(upload.name))
    name = f"{folder}/{uuid.uuid4().hex}_{filename}"
    path = default_storage.save(name, upload)
    logger.info("upload.stored", path=path, size=upload.size)
    return path
