"""
Bucket lister package.

List the S3 buckets owned by an account, or only those located in one Region.
"""

from . import args_parser, cli, client_factory, config, exceptions, lister, session
from .args_parser import ListOptions, parse_args
from .exceptions import ConfigurationError
from .lister import ListingResult, show_buckets
from .session import ResolvedConfig, resolve_config

__all__ = [
    "ConfigurationError",
    "ListOptions",
    "ListingResult",
    "ResolvedConfig",
    "args_parser",
    "cli",
    "client_factory",
    "config",
    "exceptions",
    "lister",
    "parse_args",
    "resolve_config",
    "session",
    "show_buckets",
]
