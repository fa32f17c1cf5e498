"""
Credential and region resolution for the bucket lister.

A boto3 session is bound to a named profile from the local AWS config files,
and the target region is picked by walking an explicit chain of resolvers.
Nothing here talks to AWS; credentials are resolved lazily by botocore when
the first request is signed.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import partial
from typing import Callable, Iterable, Optional

import boto3
from botocore.exceptions import ConfigParseError, ProfileNotFound

from .config import FALLBACK_REGION, REGION_ENV_VARS
from .exceptions import ProfileConfigurationError, RegionNotResolvedError

RegionResolver = Callable[[], Optional[str]]


@dataclass(frozen=True)
class ResolvedConfig:
    """Profile session plus the region every request and comparison uses."""

    profile: str
    region: str
    session: boto3.session.Session


def create_session(profile: str) -> boto3.session.Session:
    """
    Build a boto3 session for the named credentials profile.

    Raises:
        ProfileConfigurationError: If the profile does not exist or the
            shared config/credentials files cannot be parsed
    """
    try:
        session = boto3.session.Session(profile_name=profile)
    except (ProfileNotFound, ConfigParseError) as exc:
        raise ProfileConfigurationError(profile, exc) from exc
    logging.info("Using AWS profile %s", profile)
    return session


def _explicit_region(region: str | None) -> str | None:
    return region or None


def _environment_region(names: Iterable[str] = REGION_ENV_VARS) -> str | None:
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None


def _profile_region(session: boto3.session.Session) -> str | None:
    """Region configured for the session's profile in ~/.aws/config."""
    return session.region_name or None


def _fallback_region() -> str:
    return FALLBACK_REGION


def region_chain(explicit_region: str | None, session: boto3.session.Session) -> list[RegionResolver]:
    """
    Build the default region resolution chain.

    Order: the --region value, AWS_REGION / AWS_DEFAULT_REGION, the profile's
    configured region, then the hardcoded fallback.
    """
    return [
        partial(_explicit_region, explicit_region),
        _environment_region,
        partial(_profile_region, session),
        _fallback_region,
    ]


def resolve_region(chain: Iterable[RegionResolver]) -> str:
    """Return the first non-empty region produced by the chain."""
    for resolver in chain:
        region = resolver()
        if region:
            return region
    raise RegionNotResolvedError()


def resolve_config(profile: str, region: str | None = None) -> ResolvedConfig:
    """Resolve the profile session and target region for a run."""
    session = create_session(profile)
    resolved_region = resolve_region(region_chain(region, session))
    logging.debug("Resolved region %s for profile %s", resolved_region, profile)
    return ResolvedConfig(profile=profile, region=resolved_region, session=session)
