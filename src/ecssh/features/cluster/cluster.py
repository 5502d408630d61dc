"""Cluster operations for ECS."""

from __future__ import annotations

from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError

from ...core.base import BaseAWSService
from ...core.errors import AWSRequestError
from ...core.types import ClusterInfo
from ...core.utils import batch_items, paginate_aws_list

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient
    from mypy_boto3_ecs.type_defs import ClusterTypeDef

DESCRIBE_CLUSTERS_BATCH_SIZE = 100


class ClusterService(BaseAWSService):
    """Service for ECS cluster operations."""

    def __init__(self, ecs_client: ECSClient) -> None:
        super().__init__(ecs_client)

    def get_clusters(self) -> list[ClusterInfo]:
        try:
            cluster_arns = paginate_aws_list(self.ecs_client, "list_clusters", "clusterArns")
            clusters: list[ClusterInfo] = []
            for batch in batch_items(cluster_arns, DESCRIBE_CLUSTERS_BATCH_SIZE):
                response = self.ecs_client.describe_clusters(clusters=batch)
                clusters.extend(_create_cluster_info(cluster) for cluster in response.get("clusters", []))
        except (BotoCoreError, ClientError) as e:
            raise AWSRequestError("ListClusters", str(e)) from e

        return clusters


def _create_cluster_info(cluster: ClusterTypeDef) -> ClusterInfo:
    return {
        "name": cluster["clusterName"],
        "status": cluster.get("status") or "UNKNOWN",
        "running_tasks_count": cluster.get("runningTasksCount", 0),
    }
