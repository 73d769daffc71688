"""S3 client construction for object downloads.

This module encapsulates boto3 session setup and botocore timeouts.
"""

from __future__ import annotations

from typing import Any

import boto3
from botocore.config import Config

from core.config import TallyConfig


def create_s3_client(config: TallyConfig) -> Any:
    """Create a boto3 S3 client for downloads.

    Args:
        config: Runtime config with session and timeout settings.

    Returns:
        Boto3 S3 client. Retries are disabled so failures surface on
        the first attempt.
    """
    session = boto3.session.Session(**_build_session_kwargs(config))
    client_config = Config(
        connect_timeout=config.connect_timeout,
        read_timeout=config.read_timeout,
        retries={"max_attempts": 0},
    )
    return session.client("s3", config=client_config)


def _build_session_kwargs(config: TallyConfig) -> dict[str, str]:
    """Build boto3 Session kwargs from config.

    Args:
        config: Runtime config.

    Returns:
        Session keyword arguments.
    """
    kwargs: dict[str, str] = {"region_name": config.s3_region}
    if config.s3_profile:
        kwargs["profile_name"] = config.s3_profile
    return kwargs
