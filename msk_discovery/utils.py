"""
Utility functions for MSK discovery.
"""

import boto3
from botocore.exceptions import BotoCoreError
from typing import Any

from shared.exceptions import DiscoveryError


def get_kafka_client(config) -> Any:
    """Get an MSK (kafka) client, supporting named profiles and the default credential chain."""
    try:
        if config.profile:
            session = boto3.Session(profile_name=config.profile)
            return session.client("kafka", region_name=config.region)
        # Use default credential chain (env, config, SSO, etc.)
        return boto3.client("kafka", region_name=config.region)
    except BotoCoreError as e:
        raise DiscoveryError(f"unable to create kafka client: {e}") from e


def split_brokers(broker_string: str) -> tuple:
    """Split a comma-delimited bootstrap broker string, preserving order."""
    return tuple(b.strip() for b in broker_string.split(",") if b.strip())
