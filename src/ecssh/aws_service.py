"""AWS ECS service layer - handles all AWS API interactions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .core.types import ClusterInfo, TaskInfo
from .features.cluster.cluster import ClusterService
from .features.session.session import SessionService
from .features.task.task import TaskService

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient


class ECSService:
    """Service for interacting with AWS ECS."""

    def __init__(self, ecs_client: ECSClient) -> None:
        self.ecs_client = ecs_client
        # Initialize feature services
        self._cluster = ClusterService(ecs_client)
        self._task = TaskService(ecs_client)
        self._session = SessionService(ecs_client, self._task)

    def get_region(self) -> str:
        return self._session.region

    def get_clusters(self) -> list[ClusterInfo]:
        return self._cluster.get_clusters()

    def get_running_tasks(self, cluster_name: str) -> list[TaskInfo]:
        return self._task.get_running_tasks(cluster_name)

    def find_matching_tasks(self, cluster_name: str, pattern: str) -> list[TaskInfo]:
        return self._task.find_matching_tasks(cluster_name, pattern)
