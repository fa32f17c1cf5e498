"""
Configuration for the bucket lister.

Holds the defaults shared by the CLI and the region resolution chain, and
loads an optional .env file so AWS_REGION / AWS_PROFILE style settings can
live next to the toolkit's other credentials.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_PROFILE: str = "default"

# Last resort when neither --region nor the ambient provider yields a region
FALLBACK_REGION: str = "us-east-1"

# Checked in order before the profile's configured region
REGION_ENV_VARS: tuple[str, ...] = ("AWS_REGION", "AWS_DEFAULT_REGION")


def resolve_env_path(env_path: str | None = None) -> str:
    """
    Determine which .env file should be consulted.

    Priority order:
      1. Explicit parameter
      2. AWS_ENV_FILE environment variable
      3. ~/.env
    """
    if env_path:
        return env_path
    aws_env_file = os.environ.get("AWS_ENV_FILE")
    if aws_env_file:
        return aws_env_file
    return str(Path.home() / ".env")


def load_env_file(env_path: str | None = None) -> bool:
    """
    Load environment variables from a .env file if one exists.

    Variables already present in the process environment win over the file.

    Returns:
        bool: True if a file was found and loaded, False otherwise
    """
    env_file = Path(resolve_env_path(env_path)).expanduser()
    if not env_file.is_file():
        logging.debug("No .env file at %s", env_file)
        return False
    load_dotenv(env_file, override=False)
    logging.debug("Loaded environment from %s", env_file)
    return True
