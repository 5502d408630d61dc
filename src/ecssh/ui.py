"""UI layer - handles all user interaction and display logic."""

from __future__ import annotations

from rich.console import Console

from .aws_service import ECSService
from .core.base import BaseUIComponent
from .core.types import TaskInfo
from .features.cluster.ui import ClusterUI
from .features.container.ui import ContainerUI
from .features.session.ui import SessionUI
from .features.task.ui import TaskUI


class ECSNavigator(BaseUIComponent):
    """Navigator from cluster down to a container shell."""

    def __init__(self, ecs_service: ECSService, profile: str | None = None, console: Console | None = None) -> None:
        super().__init__(console)
        self.ecs_service = ecs_service
        # Feature UI components share the service instances owned by ECSService
        self._cluster_ui = ClusterUI(ecs_service._cluster, self.console)
        self._task_ui = TaskUI(ecs_service._task, self.console)
        self._container_ui = ContainerUI(self.console)
        self._session_ui = SessionUI(ecs_service._session, profile, self.console)

    def select_cluster(self) -> str:
        return self._cluster_ui.select_cluster()

    def select_task(self, cluster_name: str) -> TaskInfo:
        return self._task_ui.select_task(cluster_name)

    def find_task(self, cluster_name: str, pattern: str, verbose: bool = False) -> TaskInfo:
        return self._task_ui.find_task(cluster_name, pattern, verbose)

    def select_container(self, task: TaskInfo, force: bool = False, verbose: bool = False) -> str:
        return self._container_ui.select_container(task, force, verbose)

    def connect(self, cluster_name: str, task_arn: str, container_name: str, verbose: bool = False) -> int:
        """Open a shell in the container; returns the plugin's exit code."""
        return self._session_ui.connect(cluster_name, task_arn, container_name, verbose)

    def display_clusters(self) -> None:
        self._cluster_ui.display_clusters(self.ecs_service._task)

    def display_tasks(self, cluster_name: str) -> None:
        self._task_ui.display_tasks(cluster_name)
