"""
Shared models, resolution and emitters for the MSK client-config generator.
"""

from .emitters import Emitter, build_emitters, render
from .exceptions import ConfigError, DiscoveryError, MSKRCError, SerializationError
from .models import Cluster, RawCluster
from .resolver import resolve

__all__ = [
    "Cluster",
    "RawCluster",
    "resolve",
    "Emitter",
    "build_emitters",
    "render",
    "MSKRCError",
    "DiscoveryError",
    "ConfigError",
    "SerializationError",
]

__version__ = "1.0.0"
