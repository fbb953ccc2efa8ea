"""
Cluster records shared by discovery, resolution and the emitters.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class RawCluster:
    """A cluster as reported by the MSK directory, before aliasing."""

    identifier: str
    brokers: Tuple[str, ...]
    version: str
    arn: Optional[str] = None


@dataclass(frozen=True)
class Cluster:
    """A resolved cluster, ready to be emitted."""

    identifier: str
    display_name: str
    brokers: Tuple[str, ...]
    version: str
    alias: Optional[str] = None
    arn: Optional[str] = None
