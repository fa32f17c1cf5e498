"""
Command-line interface and main entry point for the bucket lister.

Resolves the profile and region, then lists buckets through a single S3
client.
"""

from __future__ import annotations

import logging
import sys

from botocore.exceptions import BotoCoreError, ClientError

from .args_parser import ListOptions, parse_args
from .client_factory import client_version, create_s3_client
from .config import load_env_file
from .exceptions import ConfigurationError
from .lister import show_buckets
from .session import resolve_config

# Kept quiet in verbose mode; their DEBUG output includes signed request headers
SDK_LOGGERS = ("boto3", "botocore", "s3transfer", "urllib3")


def print_banner(options: ListOptions, region: str) -> None:
    """Print the verbose-mode header shown before the listing."""
    print(f"S3 client version: {client_version()}")
    print(f"Region:            {region}")
    if options.strict:
        print("Only lists buckets in the Region.")
    else:
        print("Lists all buckets.")
    print()


def run(options: ListOptions) -> int:
    """Resolve configuration and list buckets. Returns exit code."""
    try:
        resolved = resolve_config(options.profile, options.region)
    except ConfigurationError as exc:
        logging.error("❌ Configuration error: %s", exc)
        return 1

    if options.verbose:
        print_banner(options, resolved.region)

    try:
        s3_client = create_s3_client(resolved)
        show_buckets(s3_client, resolved.region, strict=options.strict)
    except ClientError as exc:
        logging.error("❌ AWS API error: %s", exc)
        return 1
    except BotoCoreError as exc:
        logging.error("❌ AWS error: %s", exc)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the bucket lister CLI."""
    options = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )
    for name in SDK_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    load_env_file()
    return run(options)
