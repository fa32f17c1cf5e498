"""
List S3 buckets, optionally only those located in the target region.

Bucket lookups run one at a time in response order; the first failed request
aborts the listing and propagates to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class ListingResult:
    """Outcome of a single show_buckets run."""

    strict: bool
    region: str
    total: int
    in_region: int
    printed: tuple[str, ...]


def display_name(name: str | None) -> str:
    """Render a possibly absent bucket name for output."""
    return name if name is not None else ""


def list_bucket_names(s3_client) -> list[str | None]:
    """
    Issue one ListBuckets request.

    Returns:
        list: Bucket names in response order; None where a bucket has no name
    """
    response = s3_client.list_buckets()
    return [bucket.get("Name") for bucket in response.get("Buckets", [])]


def get_location_constraint(s3_client, bucket_name: str) -> str:
    """
    Get the raw location constraint reported for a bucket.

    S3 reports None for buckets in the legacy US Standard region; that comes
    back as "". Legacy values are not mapped to region names.
    """
    response = s3_client.get_bucket_location(Bucket=bucket_name)
    location = response.get("LocationConstraint")
    return location if location is not None else ""


def format_summary(result: ListingResult) -> str:
    """Build the closing summary sentence for a listing."""
    if result.strict:
        return (
            f"Found {result.in_region} buckets in the {result.region} region "
            f"out of a total of {result.total} buckets."
        )
    return f"Found {result.total} buckets in all regions."


def show_buckets(s3_client, region: str, strict: bool = False) -> ListingResult:
    """
    Print bucket names followed by a summary line.

    Args:
        s3_client: Boto3 S3 client
        region: Resolved target region, compared verbatim in strict mode
        strict: If True, only print buckets whose location equals region

    Returns:
        ListingResult: Counts and the names that were printed

    Raises:
        ClientError: If ListBuckets or any GetBucketLocation call fails
    """
    names = list_bucket_names(s3_client)
    printed: list[str] = []

    for name in names:
        bucket_name = display_name(name)
        if strict:
            location = get_location_constraint(s3_client, bucket_name)
            if location != region:
                logging.debug("Skipping %s (location %r)", bucket_name, location)
                continue
        print(bucket_name)
        printed.append(bucket_name)

    result = ListingResult(
        strict=strict,
        region=region,
        total=len(names),
        in_region=len(printed) if strict else 0,
        printed=tuple(printed),
    )
    print()
    print(format_summary(result))
    return result
