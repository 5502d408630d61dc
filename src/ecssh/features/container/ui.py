"""UI components for container operations."""

from __future__ import annotations

from rich.console import Console

from ...core.base import BaseUIComponent
from ...core.navigation import select_container
from ...core.types import TaskInfo


class ContainerUI(BaseUIComponent):
    """UI component for container selection."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__(console)

    def select_container(self, task: TaskInfo, force: bool = False, verbose: bool = False) -> str:
        container_name = select_container(task.container_names, force, self.console)
        if verbose:
            self.console.print(f"Selected container: {container_name}", style="dim")
        return container_name
