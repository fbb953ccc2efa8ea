"""
Alias and inclusion-filter resolution for discovered clusters.
"""

import logging
from typing import Dict, Iterable, List, Optional

from .models import Cluster, RawCluster

logger = logging.getLogger(__name__)


def resolve(
    raw_clusters: Iterable[RawCluster],
    aliases: Optional[Dict[str, str]] = None,
    cluster_filter: Optional[Iterable[str]] = None,
) -> List[Cluster]:
    """
    Apply display aliases and the inclusion filter to discovered clusters.

    Args:
        raw_clusters: Clusters in the order the directory returned them
        aliases: Mapping of cluster identifier to display name
        cluster_filter: Identifiers to keep; empty or None keeps everything

    Returns:
        Resolved clusters, in input order, at most one per identifier
    """
    aliases = aliases or {}
    wanted = set(cluster_filter or ())

    resolved = []
    seen = set()
    for raw in raw_clusters:
        if raw.identifier in seen:
            logger.debug("Skipping repeated cluster %s", raw.identifier)
            continue
        seen.add(raw.identifier)

        alias = aliases.get(raw.identifier)
        cluster = Cluster(
            identifier=raw.identifier,
            display_name=alias if alias is not None else raw.identifier,
            brokers=tuple(raw.brokers),
            version=raw.version,
            alias=alias,
            arn=raw.arn,
        )

        # Filter on the real identifier, never the alias
        if wanted and cluster.identifier not in wanted:
            continue
        resolved.append(cluster)

    unmatched = set(aliases) - seen
    if unmatched:
        logger.debug("Ignoring aliases for unknown clusters: %s", ", ".join(sorted(unmatched)))

    return resolved
