from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple
import os

from .constants import BROKER_STRING_KEYS, DEFAULT_BROKER_TYPE, LOGGING_CONFIG
from .exceptions import ConfigError


def parse_alias(value: str) -> Tuple[str, str]:
    """Split a ``cluster:alias`` pair on the first colon."""
    identifier, sep, alias = value.partition(":")
    if not sep:
        raise ConfigError(f"invalid pair: {value}")
    return identifier, alias


def parse_aliases(values: Optional[Iterable[str]]) -> Dict[str, str]:
    aliases = {}
    for value in values or []:
        identifier, alias = parse_alias(value)
        # Last flag wins for a repeated identifier
        aliases[identifier] = alias
    return aliases


def unique(values: Optional[Iterable[str]]) -> List[str]:
    result = []
    for value in values or []:
        if value not in result:
            result.append(value)
    return result


@dataclass
class RunConfig:
    """Settings for one generator run, built once at startup."""
    aliases: Dict[str, str] = field(default_factory=dict)
    clusters: List[str] = field(default_factory=list)
    region: Optional[str] = None
    profile: Optional[str] = None
    broker_type: str = DEFAULT_BROKER_TYPE
    log_level: str = LOGGING_CONFIG["level"]
    show_progress: bool = False

    def __post_init__(self):
        if not self.region:
            self.region = os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION")
        if not self.profile:
            self.profile = os.getenv("AWS_PROFILE")
        if self.broker_type not in BROKER_STRING_KEYS:
            raise ConfigError(
                f"Invalid broker type: {self.broker_type}. Supported: {', '.join(BROKER_STRING_KEYS)}"
            )

    @classmethod
    def from_args(cls, args) -> "RunConfig":
        """Build the run configuration from parsed command line arguments."""
        return cls(
            aliases=parse_aliases(getattr(args, "alias", None)),
            clusters=unique(getattr(args, "cluster", None)),
            region=getattr(args, "region", None),
            profile=getattr(args, "profile", None),
            broker_type=getattr(args, "broker_type", None) or DEFAULT_BROKER_TYPE,
            log_level=getattr(args, "log_level", None) or LOGGING_CONFIG["level"],
            show_progress=bool(getattr(args, "progress", False)),
        )
