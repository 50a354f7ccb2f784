from __future__ import annotations

import logging
import re
import time
from pathlib import Path

from config import settings

logger = logging.getLogger(__name__)

ALLOWED_MEDIA_TYPES = (
    # Images
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/svg+xml",
    "image/x-icon",
    "image/vnd.microsoft.icon",
    # Videos
    "video/mp4",
    "video/webm",
    "video/ogg",
    # Documents
    "application/pdf",
)

MSG_TYPE_NOT_ALLOWED = (
    "File type not allowed. Allowed types: images (JPEG, PNG, GIF, WebP, SVG, ICO), "
    "videos (MP4, WebM, OGG), and PDF."
)


def sanitize_filename(name: str) -> str:
    return re.sub(r"[^a-zA-Z0-9.-]", "_", Path(name or "upload").name) or "upload"


def store_upload(original_name: str, content: bytes) -> tuple[str, str]:
    """Write to the public upload dir as <millis>-<name>. Returns (filename, url)."""
    filename = f"{int(time.time() * 1000)}-{sanitize_filename(original_name)}"
    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    (upload_dir / filename).write_bytes(content)
    return filename, f"/uploads/{filename}"


def remove_upload(filename: str) -> bool:
    """Best effort: the DB record is already gone, so a leftover file is only logged."""
    path = Path(settings.upload_dir) / filename
    if not path.exists():
        return False
    try:
        path.unlink()
    except OSError as e:
        logger.warning("Could not delete media file %s: %s", path, e)
        return False
    return True
