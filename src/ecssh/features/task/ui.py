"""UI components for task operations."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from ...core.base import BaseUIComponent
from ...core.errors import NoRunningTasksError
from ...core.types import SelectionChoice, TaskInfo
from ...core.utils import show_spinner
from .task import TaskService, group_tasks_by_definition


class TaskUI(BaseUIComponent):
    """UI component for task selection and display."""

    def __init__(self, task_service: TaskService, console: Console | None = None) -> None:
        super().__init__(console)
        self.task_service = task_service

    def select_task(self, cluster_name: str) -> TaskInfo:
        """Pick a task definition, then a task within it when there are several."""
        with show_spinner():
            tasks = self.task_service.get_running_tasks(cluster_name)

        if not tasks:
            raise NoRunningTasksError(cluster_name)

        groups = group_tasks_by_definition(tasks)
        choices = [SelectionChoice(f"{name} ({len(group)} tasks)", group) for name, group in groups.items()]
        selected_group: list[TaskInfo] = self.prompt_choice("Select task definition:", choices, "task definition")

        task_choices = [
            SelectionChoice(f"{task.task_id} - Containers: {', '.join(task.container_names)}", task)
            for task in selected_group
        ]
        return self.select("Select task:", task_choices, "task")

    def find_task(self, cluster_name: str, pattern: str, verbose: bool = False) -> TaskInfo:
        """First running task whose definition name contains the pattern."""
        with show_spinner():
            matching = self.task_service.find_matching_tasks(cluster_name, pattern)

        task = matching[0]
        if verbose:
            self.console.print(f"Found matching task: {task.task_id}", style="dim")
            self.console.print(f"Found {len(task.container_names)} running container(s)", style="dim")
        return task

    def display_tasks(self, cluster_name: str) -> None:
        with show_spinner():
            tasks = self.task_service.get_running_tasks(cluster_name)

        table = Table(title=f"Running tasks in cluster: {cluster_name}", title_style="bold cyan")
        table.add_column("Task", style="cyan")
        table.add_column("Definition")
        table.add_column("Containers")
        for task in tasks:
            table.add_row(task.task_id, task.task_definition_name, ", ".join(task.container_names) or "none")

        self.console.print(table)
