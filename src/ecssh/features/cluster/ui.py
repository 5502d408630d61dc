"""UI components for cluster operations."""

from __future__ import annotations

from rich.console import Console

from ...core.base import BaseUIComponent
from ...core.errors import AWSRequestError, NoClustersError
from ...core.types import ClusterInfo, SelectionChoice
from ...core.utils import show_spinner
from ..task.task import TaskService
from .cluster import ClusterService

TASK_ID_DISPLAY_LENGTH = 12


def format_cluster_choice(cluster: ClusterInfo) -> str:
    count = cluster["running_tasks_count"]
    if count > 0:
        return f"{cluster['name']} ({count} running tasks)"
    return f"{cluster['name']} (no running tasks)"


class ClusterUI(BaseUIComponent):
    """UI component for cluster selection and display."""

    def __init__(self, cluster_service: ClusterService, console: Console | None = None) -> None:
        super().__init__(console)
        self.cluster_service = cluster_service

    def select_cluster(self) -> str:
        with show_spinner():
            clusters = self.cluster_service.get_clusters()

        if not clusters:
            raise NoClustersError()

        choices = [SelectionChoice(format_cluster_choice(cluster), cluster["name"]) for cluster in clusters]
        return self.prompt_choice("Select cluster:", choices, "cluster")

    def display_clusters(self, task_service: TaskService) -> None:
        """Print every cluster with its running tasks."""
        with show_spinner():
            clusters = self.cluster_service.get_clusters()

        self.console.print("Available clusters:", style="bold cyan")
        for cluster in clusters:
            self.console.print(
                f"  - {cluster['name']} (status: {cluster['status']}, running tasks: {cluster['running_tasks_count']})"
            )
            if cluster["running_tasks_count"] > 0:
                self._display_cluster_tasks(task_service, cluster["name"])
            self.console.print()

    def _display_cluster_tasks(self, task_service: TaskService, cluster_name: str) -> None:
        self.console.print("    Tasks:")
        try:
            with show_spinner():
                tasks = task_service.get_running_tasks(cluster_name)
        except AWSRequestError as e:
            self.console.print(f"      Error listing tasks: {e.detail}", style="red", markup=False)
            return

        for task in tasks:
            task_id = task.task_id
            if len(task_id) > TASK_ID_DISPLAY_LENGTH:
                task_id = task_id[:TASK_ID_DISPLAY_LENGTH] + "..."
            containers = ", ".join(task.container_names) or "none"
            self.console.print(f"      • {task_id} ({task.task_definition_name}) - {containers}", markup=False)
