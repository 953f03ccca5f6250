"""
File Upload Utility - Validate and store resume files.

Supported formats:
- PDF (.pdf) only

Max file size: configurable, 5MB by default
Files land in UPLOAD_DIR and are served back under /uploads/.
"""

import logging
import os
import secrets
import time
from typing import Tuple
from fastapi import UploadFile, HTTPException

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {'.pdf'}
ALLOWED_CONTENT_TYPES = {'application/pdf'}
UPLOAD_URL_PREFIX = "/uploads"


def get_file_extension(filename: str) -> str:
    """Get lowercase file extension."""
    if '.' not in filename:
        return ''
    return '.' + filename.rsplit('.', 1)[1].lower()


def make_stored_filename(ext: str) -> str:
    """Unique on-disk name, e.g. resume-1718000000000-3f9a1c2b.pdf"""
    return f"resume-{int(time.time() * 1000)}-{secrets.token_hex(4)}{ext}"


async def save_resume(file: UploadFile, upload_dir: str, max_size_mb: int = 5) -> Tuple[str, str]:
    """
    Validate an uploaded resume and write it to disk.

    Args:
        file: FastAPI UploadFile
        upload_dir: Directory to store the file in (created if missing)
        max_size_mb: Size limit

    Returns:
        Tuple of (public_url, original_filename)

    Raises:
        HTTPException on validation errors
    """
    # Validate filename
    if not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    ext = get_file_extension(file.filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise HTTPException(status_code=400, detail="Only PDF files are allowed")

    if file.content_type and file.content_type not in ALLOWED_CONTENT_TYPES:
        raise HTTPException(status_code=400, detail="Only PDF files are allowed")

    # Read content
    content = await file.read()

    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")

    # Check size
    if len(content) > max_size_mb * 1024 * 1024:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size: {max_size_mb}MB"
        )

    os.makedirs(upload_dir, exist_ok=True)
    stored_name = make_stored_filename(ext)
    with open(os.path.join(upload_dir, stored_name), "wb") as out:
        out.write(content)

    logger.info("Stored resume %s (%d bytes) as %s", file.filename, len(content), stored_name)
    return f"{UPLOAD_URL_PREFIX}/{stored_name}", file.filename
