# backend/utils/uploads.py
import logging
import os
import shutil
import time
import uuid
from pathlib import Path
from typing import Optional
from urllib.parse import urljoin

from fastapi import Request, UploadFile

logger = logging.getLogger(__name__)

UPLOADS_PREFIX = "/uploads"


def make_filename(original: Optional[str], naming: str = "timestamp") -> str:
    """Name for a stored upload: <ms timestamp><ext>, or <uuid4><ext> when naming == "uuid"."""
    ext = os.path.splitext(original or "")[1]
    if naming == "uuid":
        return f"{uuid.uuid4()}{ext}"
    return f"{int(time.time() * 1000)}{ext}"


def save_upload(file: UploadFile, upload_dir: Path, naming: str = "timestamp") -> str:
    filename = make_filename(file.filename, naming)
    save_path = Path(upload_dir) / filename
    try:
        with open(save_path, "wb") as buffer:
            shutil.copyfileobj(file.file, buffer)
    finally:
        file.file.close()
    logger.info("Stored upload %s as %s", file.filename, save_path)
    return filename


def public_url(request: Request, filename: str) -> str:
    # BACKEND_URL wins, otherwise the URL the client used to reach us
    base = request.app.state.settings.BACKEND_URL or str(request.base_url)
    return urljoin(base.rstrip("/") + "/", f"{UPLOADS_PREFIX}/{filename}".lstrip("/"))


def store_image(request: Request, file: Optional[UploadFile]) -> Optional[str]:
    """Save an optional "image" upload and return its public URL (None without a file)."""
    if file is None or not file.filename:
        return None
    settings = request.app.state.settings
    filename = save_upload(file, Path(settings.UPLOAD_DIR), settings.UPLOAD_NAMING)
    return public_url(request, filename)
