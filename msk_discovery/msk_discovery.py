"""
Amazon MSK cluster directory.

Lists every cluster in the account and resolves each one's bootstrap brokers
and Kafka version. Lookups are sequential; any failure aborts the whole pass.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

from botocore.exceptions import BotoCoreError, ClientError
from tqdm import tqdm

from shared.config import RunConfig
from shared.constants import (
    BROKER_STRING_KEYS,
    DEFAULT_BROKER_TYPE,
    SERVERLESS_BROKER_TYPES,
    SERVERLESS_VERSION,
)
from shared.exceptions import DiscoveryError
from shared.logging_utils import DiscoveryLogger
from shared.models import RawCluster

from .utils import get_kafka_client, split_brokers

logger = logging.getLogger(__name__)


class MSKDirectory:
    """Lists MSK clusters and their bootstrap brokers."""

    def __init__(self, config: RunConfig, client: Optional[Any] = None):
        """
        Initialize the directory.

        Args:
            config: Run configuration (region, profile, broker type)
            client: Preconfigured boto3 kafka client; created from config if omitted
        """
        self.config = config
        self.broker_key = BROKER_STRING_KEYS[config.broker_type or DEFAULT_BROKER_TYPE]
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = get_kafka_client(self.config)
        return self._client

    def _list_filter(self) -> Dict[str, str]:
        # Serverless clusters only serve IAM-authenticated brokers
        if self.config.broker_type in SERVERLESS_BROKER_TYPES:
            return {}
        return {"ClusterTypeFilter": "PROVISIONED"}

    def _iter_cluster_info(self) -> Iterator[Dict[str, Any]]:
        paginator = self.client.get_paginator("list_clusters_v2")
        for page in paginator.paginate(**self._list_filter()):
            for info in page.get("ClusterInfoList", []):
                yield info

    def list_cluster_info(self) -> List[Dict[str, Any]]:
        """Return the raw ClusterInfoList entries for every cluster."""
        try:
            return list(self._iter_cluster_info())
        except (BotoCoreError, ClientError) as e:
            raise DiscoveryError(f"unable to list clusters: {e}") from e

    @staticmethod
    def cluster_version(info: Dict[str, Any]) -> Optional[str]:
        """Kafka version of a provisioned cluster; serverless clusters have none."""
        if info.get("ClusterType") == "SERVERLESS":
            return SERVERLESS_VERSION
        provisioned = info.get("Provisioned") or {}
        software = provisioned.get("CurrentBrokerSoftwareInfo") or info.get(
            "CurrentBrokerSoftwareInfo"
        ) or {}
        return software.get("KafkaVersion")

    def get_brokers(self, arn: str) -> tuple:
        """Look up the bootstrap brokers of one cluster."""
        try:
            response = self.client.get_bootstrap_brokers(ClusterArn=arn)
        except (BotoCoreError, ClientError) as e:
            raise DiscoveryError(str(e), cluster=arn) from e

        broker_string = response.get(self.broker_key)
        if not broker_string:
            raise DiscoveryError(f"no {self.broker_key} in bootstrap brokers response", cluster=arn)
        brokers = split_brokers(broker_string)
        if not brokers:
            raise DiscoveryError(f"empty {self.broker_key} broker list", cluster=arn)
        return brokers

    def _to_raw_cluster(self, info: Dict[str, Any]) -> RawCluster:
        arn = info.get("ClusterArn")
        name = info.get("ClusterName")
        if not arn or not name:
            raise DiscoveryError(f"cluster without name or arn: {arn or name or 'unknown'}")

        version = self.cluster_version(info)
        if not version:
            raise DiscoveryError("no kafka version reported", cluster=arn)

        brokers = self.get_brokers(arn)
        return RawCluster(identifier=name, brokers=brokers, version=version, arn=arn)

    def list_clusters(self) -> List[RawCluster]:
        """
        Discover every MSK cluster visible to the account.

        Returns:
            Clusters in the order the service listed them

        Raises:
            DiscoveryError: if listing fails or any single cluster cannot be resolved
        """
        region = self.config.region or "default region"
        with DiscoveryLogger(logger, f"MSK discovery in {region}") as dlog:
            infos = self.list_cluster_info()

            clusters = []
            for info in tqdm(
                infos,
                desc="Brokers",
                unit="cluster",
                disable=not self.config.show_progress,
            ):
                cluster = self._to_raw_cluster(info)
                dlog.log_cluster(cluster.identifier, len(cluster.brokers), cluster.version)
                clusters.append(cluster)

            dlog.log_discovery_result(len(clusters), region)
        return clusters
