"""Shared pytest fixtures for test files."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from botocore.exceptions import ClientError

_CREATED = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_client_error(operation_name: str, code: str = "AccessDenied", message: str = "Access Denied"):
    """Build a botocore ClientError the way the SDK raises it."""
    return ClientError({"Error": {"Code": code, "Message": message}}, operation_name)


class StubS3Client:
    """Scripted stand-in for the two S3 operations the lister issues.

    buckets is a list of (name, location_constraint) pairs. A name of None
    produces a bucket entry without a Name key; a location of None mirrors
    what S3 returns for us-east-1.
    """

    def __init__(self, buckets, list_error=None, location_errors=None):
        self.buckets = list(buckets)
        self.list_error = list_error
        self.location_errors = dict(location_errors or {})
        self.calls: list[tuple[str, str | None]] = []

    def list_buckets(self):
        self.calls.append(("list_buckets", None))
        if self.list_error is not None:
            raise self.list_error
        entries = []
        for name, _ in self.buckets:
            entry = {"CreationDate": _CREATED}
            if name is not None:
                entry["Name"] = name
            entries.append(entry)
        return {"Buckets": entries, "Owner": {"DisplayName": "owner", "ID": "abc123"}}

    def get_bucket_location(self, Bucket):  # pylint: disable=invalid-name
        self.calls.append(("get_bucket_location", Bucket))
        if Bucket in self.location_errors:
            raise self.location_errors[Bucket]
        for name, location in self.buckets:
            if (name or "") == Bucket:
                return {"LocationConstraint": location}
        raise make_client_error("GetBucketLocation", "NoSuchBucket", "The specified bucket does not exist")

    @property
    def location_calls(self):
        return [bucket for operation, bucket in self.calls if operation == "get_bucket_location"]


@pytest.fixture(name="make_s3_client")
def fixture_make_s3_client():
    """Factory for StubS3Client instances."""

    def _make(buckets=(), **kwargs):
        return StubS3Client(buckets, **kwargs)

    return _make


@pytest.fixture(name="two_region_client")
def fixture_two_region_client(make_s3_client):
    """Client with one bucket in us-east-1 and one in eu-west-1."""
    return make_s3_client([("alpha", "us-east-1"), ("beta", "eu-west-1")])
