"""Store uploaded game images on local disk under collision-free names."""

import logging
import os
import secrets
import time
from pathlib import Path, PurePosixPath, PureWindowsPath

from app.services.errors import ValidationError

logger = logging.getLogger(__name__)

MAX_FILENAME_LENGTH = 200


def _safe_basename(filename: str) -> str:
    """Drop any directory part a client put in the filename (either separator style)."""
    name = PureWindowsPath(PurePosixPath(filename).name).name.strip()
    return name[-MAX_FILENAME_LENGTH:]


def build_stored_name(filename: str) -> str:
    """<epoch-ms>-<random>-<basename>, unique enough that two uploads never collide."""
    base = _safe_basename(filename)
    if not base:
        raise ValidationError("No file uploaded")
    return f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}-{base}"


def save_upload(
    filename: str,
    content: bytes,
    upload_dir: str | Path,
    url_prefix: str,
    max_bytes: int,
) -> str:
    """Write content to upload_dir and return the public URL it is served from."""
    if len(content) > max_bytes:
        raise ValidationError(f"File size must not exceed {max_bytes} bytes.")
    stored_name = build_stored_name(filename)
    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)
    (directory / stored_name).write_bytes(content)
    logger.info("Stored upload", extra={"stored_name": stored_name, "size": len(content)})
    return f"{url_prefix.rstrip('/')}/{stored_name}"


def upload_dir_writable(upload_dir: str) -> bool:
    """True when uploads can be stored: the directory exists and this process may write to it."""
    path = Path(upload_dir)
    return path.is_dir() and os.access(path, os.W_OK)
