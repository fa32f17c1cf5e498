"""
S3 client creation for the bucket lister.
"""

from __future__ import annotations

import boto3

from .session import ResolvedConfig


def create_s3_client(resolved: ResolvedConfig):
    """
    Create the S3 client bound to the resolved profile and region.

    SDK defaults apply for retries, timeouts and connection pooling.

    Returns:
        boto3.client: S3 client used for ListBuckets and GetBucketLocation
    """
    return resolved.session.client("s3", region_name=resolved.region)


def client_version() -> str:
    """Version string of the AWS SDK the client is built from."""
    return boto3.__version__
