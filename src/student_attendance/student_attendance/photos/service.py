from __future__ import annotations

import base64
import binascii
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import now_utc
from ..common.validators import require_non_empty
from ..core.constants import MAX_PHOTO_BYTES, PHOTO_URL_TTL_SECONDS
from ..core.exceptions import ValidationError
from .storage import PhotoStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedPhoto:
    file_name: str
    url: Optional[str]

    def to_dict(self) -> dict:
        return {"fileName": self.file_name, "url": self.url}


def decode_file_data(file_data: str) -> bytes:
    """Decode base64 payloads, accepting `data:<mime>;base64,` URLs as sent by browsers."""

    payload = file_data.split(",", 1)[1] if "," in file_data else file_data
    try:
        return base64.b64decode(payload.strip(), validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError("fileData must be base64 encoded")


class PhotoService:
    """Use case: store a student photo and hand back a long-lived signed URL."""

    def __init__(
        self,
        storage: PhotoStorage,
        *,
        max_bytes: int = MAX_PHOTO_BYTES,
        url_ttl_seconds: int = PHOTO_URL_TTL_SECONDS,
    ):
        self._storage = storage
        self._max_bytes = int(max_bytes)
        self._url_ttl = int(url_ttl_seconds)

    def upload(
        self,
        *,
        file_name: Any,
        file_data: Any,
        student_id: Optional[str] = None,
        now: datetime | None = None,
    ) -> UploadedPhoto:
        if not file_name or not file_data:
            raise ValidationError("fileName and fileData are required")
        file_name = require_non_empty(file_name, "fileName")
        data = decode_file_data(require_non_empty(file_data, "fileData"))
        if not data:
            raise ValidationError("fileData is empty")
        if len(data) > self._max_bytes:
            raise ValidationError(f"Image size must be less than {self._max_bytes // (1024 * 1024)}MB")

        ext = file_name.rsplit(".", 1)[-1].lower() if "." in file_name else "bin"
        stamp_ms = int((now or now_utc()).timestamp() * 1000)
        key = f"{student_id or uuid.uuid4()}-{stamp_ms}.{ext}"

        self._storage.put(key, data, content_type=f"image/{ext}")
        logger.info("Stored photo %s (%d bytes)", key, len(data))
        return UploadedPhoto(file_name=key, url=self._storage.signed_url(key, expires_in=self._url_ttl))
