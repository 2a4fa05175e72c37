from __future__ import annotations

from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from simple_uploader.logging_config import get_logger

logger = get_logger(__name__)

VISIBILITY_ACL = {
    "public": "public-read",
    "private": "private",
}


class S3Storage:
    def __init__(
        self,
        bucket: str,
        prefix: str = "",
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        client: Any = None,
    ) -> None:
        self.bucket = bucket
        self.prefix = prefix.strip("/")
        if client is None:
            session = boto3.session.Session(region_name=region) if region else boto3.session.Session()
            client = session.client("s3", endpoint_url=endpoint_url)
        self.client = client

    def _key(self, key: str) -> str:
        key = key.lstrip("/")
        return f"{self.prefix}/{key}" if self.prefix else key

    def put(self, key: str, contents: bytes, visibility: str | None = None) -> bool:
        s3_key = self._key(key)
        params: dict[str, Any] = {"Bucket": self.bucket, "Key": s3_key, "Body": contents}
        acl = VISIBILITY_ACL.get(visibility) if visibility else None
        if acl:
            params["ACL"] = acl
        try:
            self.client.put_object(**params)
        except (ClientError, BotoCoreError) as exc:
            logger.warning(
                "S3 write failed for s3://{bucket}/{key}: {error}",
                bucket=self.bucket,
                key=s3_key,
                error=str(exc),
            )
            return False
        return True


__all__ = ["S3Storage", "VISIBILITY_ACL"]
