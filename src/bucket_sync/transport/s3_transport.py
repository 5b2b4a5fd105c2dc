"""S3-compatible transport (AWS S3, SeaweedFS, MinIO)."""

import logging
from typing import BinaryIO

import boto3
from botocore.client import BaseClient
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..classifier import classify, translate_error
from ..outcomes import Found, Outcome
from .base import ListPage, ObjectSummary, ObjectTransport, StorageObject

log = logging.getLogger(__name__)

_BOTO_ERRORS = (BotoCoreError, ClientError)


class S3Transport(ObjectTransport):
    """S3-compatible object storage transport bound to one bucket."""

    def __init__(
        self,
        bucket_name: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        aws_access_key_id: str | None = None,
        aws_secret_access_key: str | None = None,
        aws_session_token: str | None = None,
        session: boto3.session.Session | None = None,
        s3_client: BaseClient | None = None,
    ):
        if not bucket_name:
            raise ValueError("bucket_name cannot be empty")

        self._bucket = bucket_name
        if session is not None and session.region_name:
            region = session.region_name
        self._region = region

        if s3_client is not None:
            self._client = s3_client
            return

        kwargs: dict = {
            "config": Config(
                region_name=region,
                signature_version="s3v4",
                retries={"max_attempts": 3, "mode": "standard"},
            ),
        }
        if aws_access_key_id and aws_secret_access_key:
            kwargs["aws_access_key_id"] = aws_access_key_id
            kwargs["aws_secret_access_key"] = aws_secret_access_key
        if aws_session_token:
            kwargs["aws_session_token"] = aws_session_token
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url

        factory = session.client if session is not None else boto3.client
        self._client = factory("s3", **kwargs)

    @property
    def bucket(self) -> str:
        return self._bucket

    @property
    def region(self) -> str:
        return self._region

    def get(self, key: str) -> Outcome[StorageObject]:
        try:
            response = self._client.get_object(Bucket=self._bucket, Key=key)
            body = response["Body"]
            try:
                content = body.read()
            finally:
                body.close()
            return Found(
                StorageObject(
                    content=content,
                    content_type=response.get("ContentType"),
                    metadata=response.get("Metadata", {}),
                )
            )
        except _BOTO_ERRORS as e:
            return classify(e, key)

    def head(self, key: str) -> Outcome[None]:
        try:
            self._client.head_object(Bucket=self._bucket, Key=key)
            return Found(None)
        except _BOTO_ERRORS as e:
            return classify(e, key)

    def put(
        self,
        key: str,
        body: bytes | BinaryIO,
        content_type: str | None = None,
        metadata: dict[str, str] | None = None,
    ) -> None:
        params: dict = {
            "Bucket": self._bucket,
            "Key": key,
            "Body": body,
        }
        if content_type:
            params["ContentType"] = content_type
        if metadata:
            params["Metadata"] = metadata
        try:
            self._client.put_object(**params)
        except _BOTO_ERRORS as e:
            raise translate_error(e, key) from e

    def delete(self, key: str) -> Outcome[None]:
        try:
            self._client.delete_object(Bucket=self._bucket, Key=key)
            return Found(None)
        except _BOTO_ERRORS as e:
            return classify(e, key)

    def list_page(self, prefix: str, continuation_token: str | None = None) -> ListPage:
        params: dict = {"Bucket": self._bucket, "PaginationConfig": {}}
        if prefix:
            params["Prefix"] = prefix
        if continuation_token:
            params["PaginationConfig"]["StartingToken"] = continuation_token
        paginator = self._client.get_paginator("list_objects_v2")
        try:
            response = next(iter(paginator.paginate(**params)), {})
        except _BOTO_ERRORS as e:
            raise translate_error(e) from e

        objects = [
            ObjectSummary(
                key=obj["Key"],
                size=obj.get("Size", 0),
                etag=obj.get("ETag", "").strip('"'),
                last_modified=obj.get("LastModified"),
            )
            for obj in response.get("Contents", [])
        ]
        next_token = response.get("NextContinuationToken") if response.get("IsTruncated") else None
        return ListPage(objects=objects, next_token=next_token)

    def presign(self, key: str, expires_in: int) -> str:
        try:
            return self._client.generate_presigned_url(
                ClientMethod="get_object",
                Params={"Bucket": self._bucket, "Key": key},
                ExpiresIn=expires_in,
            )
        except _BOTO_ERRORS as e:
            raise translate_error(e, key) from e
