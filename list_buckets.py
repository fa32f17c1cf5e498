#!/usr/bin/env python3
"""
List your Amazon S3 buckets, or just the buckets in the Region.

Usage:
    python list_buckets.py [-p PROFILE] [-r REGION] [-s] [-v]

This is a thin wrapper around the bucket_lister package.
"""
from __future__ import annotations

from bucket_lister.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
