"""
Client configuration emitters.

Each supported client tool gets its own emitter. The only thing they share is
``serialize()``, which encodes one output document entirely in memory or
raises ``SerializationError``. A format's ``build`` function turns a resolved
cluster list into the emitters for every document that format produces.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Sequence

import tomli_w
import yaml

from .constants import KCL_TIMEOUT_MILLIS
from .exceptions import SerializationError
from .models import Cluster


def _dump_yaml(fmt: str, document: Dict[str, Any]) -> bytes:
    try:
        text = yaml.safe_dump(document, default_flow_style=False, sort_keys=False)
    except yaml.YAMLError as e:
        raise SerializationError(fmt, str(e)) from e
    return text.encode("utf-8")


class Emitter(ABC):
    """Base class for client configuration emitters."""

    format_name = ""

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Encode the document.

        Returns:
            The encoded document

        Raises:
            SerializationError: if the encoder rejects the document
        """


class KafEmitter(Emitter):
    """kaf configuration: a single list of every cluster."""

    format_name = "kaf"

    def __init__(self, clusters: Sequence[Cluster]):
        self.clusters = list(clusters)

    def _document(self) -> Dict[str, Any]:
        return {
            "clusters": [
                {
                    "name": c.display_name,
                    "version": c.version,
                    "brokers": list(c.brokers),
                }
                for c in self.clusters
            ]
        }

    def serialize(self) -> bytes:
        return _dump_yaml(self.format_name, self._document())


class KclEmitter(Emitter):
    """kcl configuration for one cluster, headed by a name comment."""

    format_name = "kcl"

    def __init__(self, cluster: Cluster, timeout_ms: int = KCL_TIMEOUT_MILLIS):
        self.cluster = cluster
        self.timeout_ms = timeout_ms

    def preamble(self) -> str:
        if self.cluster.alias:
            return f"# name: {self.cluster.identifier}, alias: {self.cluster.alias}"
        return f"# name: {self.cluster.identifier}"

    def _document(self) -> Dict[str, Any]:
        return {
            "seed_brokers": list(self.cluster.brokers),
            "timeout_ms": self.timeout_ms,
        }

    def serialize(self) -> bytes:
        try:
            body = tomli_w.dumps(self._document())
        except (TypeError, ValueError) as e:
            raise SerializationError(self.format_name, str(e)) from e
        return f"{self.preamble()}\n{body}".encode("utf-8")


class KafkactlEmitter(Emitter):
    """kafkactl configuration: one context per display name."""

    format_name = "kafkactl"

    def __init__(self, clusters: Sequence[Cluster]):
        self.clusters = list(clusters)

    def contexts(self) -> Dict[str, Dict[str, List[str]]]:
        contexts = {}
        for c in self.clusters:
            # Later clusters overwrite earlier ones sharing a display name
            contexts[c.display_name] = {"brokers": list(c.brokers)}
        return contexts

    def _document(self) -> Dict[str, Any]:
        return {
            "contexts": self.contexts(),
            "current-context": "",
        }

    def serialize(self) -> bytes:
        return _dump_yaml(self.format_name, self._document())


def build_kaf(clusters: Sequence[Cluster]) -> List[Emitter]:
    return [KafEmitter(clusters)]


def build_kcl(clusters: Sequence[Cluster]) -> List[Emitter]:
    return [KclEmitter(c) for c in clusters]


def build_kafkactl(clusters: Sequence[Cluster]) -> List[Emitter]:
    return [KafkactlEmitter(clusters)]


BUILDERS: Dict[str, Callable[[Sequence[Cluster]], List[Emitter]]] = {
    "kaf": build_kaf,
    "kcl": build_kcl,
    "kafkactl": build_kafkactl,
}


def build_emitters(fmt: str, clusters: Sequence[Cluster]) -> List[Emitter]:
    """Return the emitters producing every document for ``fmt``."""
    try:
        builder = BUILDERS[fmt]
    except KeyError:
        raise ValueError(f"Unsupported format: {fmt}. Supported: {', '.join(BUILDERS)}")
    return builder(clusters)


def render(emitters: Sequence[Emitter]) -> List[bytes]:
    """Serialize every emitter before anything is written out."""
    return [e.serialize() for e in emitters]
