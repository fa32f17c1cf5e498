"""
Argument parsing for the bucket lister CLI.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from .config import DEFAULT_PROFILE, FALLBACK_REGION


@dataclass(frozen=True)
class ListOptions:
    """Parsed command-line options."""

    profile: str = DEFAULT_PROFILE
    region: str | None = None
    strict: bool = False
    verbose: bool = False


def build_parser() -> argparse.ArgumentParser:
    """Create the ArgumentParser for the bucket lister."""
    parser = argparse.ArgumentParser(
        description="List your Amazon S3 buckets, or just the buckets in the Region.",
    )
    parser.add_argument(
        "-p",
        "--profile",
        default=DEFAULT_PROFILE,
        help=f"Profile name in ~/.aws/credentials (default: {DEFAULT_PROFILE}).",
    )
    parser.add_argument(
        "-r",
        "--region",
        help=(
            "AWS Region for the client and the --strict comparison. Falls back to "
            f"AWS_REGION, AWS_DEFAULT_REGION, the profile's region, then {FALLBACK_REGION}."
        ),
    )
    parser.add_argument(
        "-s",
        "--strict",
        action="store_true",
        help="Only list buckets located in the Region.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Display the client version, Region and listing mode.",
    )
    return parser


def parse_args(argv: list[str]) -> ListOptions:
    """Parse command-line arguments into ListOptions."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.profile:
        parser.error("--profile must not be empty.")
    if args.region is not None and not args.region:
        parser.error("--region must not be empty.")
    return ListOptions(
        profile=args.profile,
        region=args.region,
        strict=args.strict,
        verbose=args.verbose,
    )
