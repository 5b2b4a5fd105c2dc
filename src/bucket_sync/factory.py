"""Factory for creating bucket clients based on configuration."""

import logging
import os

import boto3

from .client import BucketClient
from .transport.s3_transport import S3Transport

log = logging.getLogger(__name__)


def create_bucket_client(
    bucket_name: str | None = None,
    region: str | None = None,
    endpoint_url: str | None = None,
    session: boto3.session.Session | None = None,
) -> BucketClient:
    """Create a BucketClient backed by an S3-compatible store.

    Arguments left as ``None`` are read from environment variables, so the
    same settings drive local development, CI and deployed services.

    Args:
        bucket_name: Bucket name. Falls back to OBJECT_STORAGE_BUCKET_NAME, then S3_BUCKET_NAME.
        region: Region. Falls back to S3_REGION, then "us-east-1". Ignored when *session* has a region.
        endpoint_url: S3-compatible endpoint (MinIO, SeaweedFS). Falls back to S3_ENDPOINT_URL.
        session: Pre-configured boto3 session whose credentials and region are used.

    Raises:
        ValueError: If no bucket name can be resolved.
    """
    resolved_bucket = bucket_name or os.getenv("OBJECT_STORAGE_BUCKET_NAME") or os.getenv("S3_BUCKET_NAME")
    if not resolved_bucket:
        raise ValueError("Bucket name required: set OBJECT_STORAGE_BUCKET_NAME, S3_BUCKET_NAME, or pass bucket_name")

    transport = S3Transport(
        bucket_name=resolved_bucket,
        region=region or os.getenv("S3_REGION", "us-east-1"),
        endpoint_url=endpoint_url or os.getenv("S3_ENDPOINT_URL"),
        aws_access_key_id=os.getenv("AWS_ACCESS_KEY_ID"),
        aws_secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY"),
        aws_session_token=os.getenv("AWS_SESSION_TOKEN"),
        session=session,
    )
    log.debug("Created bucket client for s3://%s (region=%s)", resolved_bucket, transport.region)
    return BucketClient(transport)
