"""Shared upload helper for profile pictures and verification documents."""

from __future__ import annotations

import secrets

import structlog

from ..clock import epoch_millis
from ..store import FileStorage, Upload

_logger = structlog.get_logger(__name__)


def object_name(owner_id: str, upload: Upload) -> str:
    """``<owner>-<epoch ms>-<random>.<ext>``; the suffix keeps same-millisecond uploads apart."""
    return f"{owner_id}-{epoch_millis()}-{secrets.token_hex(3)}.{upload.extension}"


def upload_public(files: FileStorage, bucket: str, owner_id: str, upload: Upload) -> str:
    """Store ``upload`` under a fresh name and return its public URL."""
    name = object_name(owner_id, upload)
    stored = files.upload(bucket, name, upload.content, content_type=upload.content_type)
    _logger.info("storage.uploaded", bucket=bucket, path=stored, size=len(upload.content))
    return files.public_url(bucket, stored)
