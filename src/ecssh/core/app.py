"""Main application flows for the ecssh CLI."""

from rich.console import Console

from ..ui import ECSNavigator

console = Console()


def run_interactive(navigator: ECSNavigator) -> int:
    """Walk cluster -> task definition -> task -> container, then connect."""
    cluster_name = navigator.select_cluster()
    task = navigator.select_task(cluster_name)
    container_name = navigator.select_container(task)

    console.print(f"\nConnecting to {container_name} in task {task.task_id}...", style="cyan")
    return navigator.connect(cluster_name, task.task_arn, container_name)


def run_connect(
    navigator: ECSNavigator, cluster_name: str, task_name: str, force: bool = False, verbose: bool = False
) -> int:
    """Connect to the first running task whose definition name contains task_name."""
    if verbose:
        console.print(f"Searching for tasks in cluster: {cluster_name}", style="dim", markup=False)
        console.print(f"Task name pattern: {task_name}", style="dim", markup=False)

    task = navigator.find_task(cluster_name, task_name, verbose)
    container_name = navigator.select_container(task, force, verbose)
    return navigator.connect(cluster_name, task.task_arn, container_name, verbose)
