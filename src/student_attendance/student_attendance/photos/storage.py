from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


class PhotoStorage(Protocol):
    def put(self, key: str, data: bytes, *, content_type: str) -> None:
        raise NotImplementedError

    def signed_url(self, key: str, *, expires_in: int) -> Optional[str]:
        raise NotImplementedError


@dataclass(frozen=True)
class S3StorageConfig:
    bucket: str
    endpoint_url: Optional[str] = None
    region: Optional[str] = None
    access_key: Optional[str] = None
    secret_key: Optional[str] = None

    @classmethod
    def from_dict(cls, cfg: dict) -> "S3StorageConfig":
        return cls(
            bucket=str(cfg["bucket"]),
            endpoint_url=cfg.get("endpoint_url") or None,
            region=cfg.get("region") or None,
            access_key=cfg.get("access_key") or None,
            secret_key=cfg.get("secret_key") or None,
        )


class S3PhotoStorage(PhotoStorage):
    """Photo blobs in an S3 (or MinIO / S3-compatible) bucket."""

    def __init__(self, config: S3StorageConfig, *, client=None):
        self._bucket = config.bucket
        self._client = client or boto3.client(
            "s3",
            endpoint_url=config.endpoint_url,
            region_name=config.region,
            aws_access_key_id=config.access_key,
            aws_secret_access_key=config.secret_key,
        )

    @property
    def bucket(self) -> str:
        return self._bucket

    def ensure_bucket(self) -> bool:
        """Create the private bucket when missing. Returns True when it was created.

        Failures are logged and reported as False; the API still starts.
        """

        try:
            self._client.head_bucket(Bucket=self._bucket)
            return False
        except ClientError as e:
            code = str(e.response.get("Error", {}).get("Code", ""))
            if code not in {"404", "NoSuchBucket", "NotFound"}:
                logger.error("Error checking storage bucket %s: %s", self._bucket, e)
                return False
        except BotoCoreError as e:
            logger.error("Error initializing storage: %s", e)
            return False

        try:
            self._client.create_bucket(Bucket=self._bucket, ACL="private")
        except (BotoCoreError, ClientError) as e:
            logger.error("Error creating storage bucket %s: %s", self._bucket, e)
            return False
        logger.info("Storage bucket %s created", self._bucket)
        return True

    def put(self, key: str, data: bytes, *, content_type: str) -> None:
        try:
            self._client.put_object(Bucket=self._bucket, Key=key, Body=data, ContentType=content_type)
        except (BotoCoreError, ClientError) as e:
            raise StorageError(f"Failed to upload photo: {e}") from e

    def signed_url(self, key: str, *, expires_in: int) -> Optional[str]:
        try:
            return self._client.generate_presigned_url(
                "get_object",
                Params={"Bucket": self._bucket, "Key": key},
                ExpiresIn=int(expires_in),
            )
        except (BotoCoreError, ClientError) as e:
            logger.warning("Could not sign URL for %s: %s", key, e)
            return None
