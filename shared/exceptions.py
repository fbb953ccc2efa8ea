"""Exceptions raised by the MSK client-config generator."""

from typing import Optional


class MSKRCError(Exception):
    """Base exception for mskrc."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class DiscoveryError(MSKRCError):
    """Raised when listing clusters or looking up brokers fails."""

    def __init__(self, message: str, cluster: Optional[str] = None):
        self.cluster = cluster
        if cluster:
            message = f"arn: {cluster}: {message}"
        super().__init__(message)


class ConfigError(MSKRCError):
    """Raised when command line configuration is malformed."""
    pass


class SerializationError(MSKRCError):
    """Raised when an emitter cannot encode its document."""

    def __init__(self, fmt: str, message: str):
        self.format = fmt
        super().__init__(f"{fmt} encode: {message}")
