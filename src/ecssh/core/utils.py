"""Utility functions for ecssh."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Literal, TypeVar

from rich.console import Console
from rich.spinner import Spinner

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient

T = TypeVar("T")

console = Console()
err_console = Console(stderr=True)


def extract_name_from_arn(arn: str) -> str:
    """Extract resource name (or short task id) from AWS ARN."""
    return arn.split("/")[-1]


def extract_task_definition_name(task_definition_arn: str) -> str:
    """Extract task definition family from its ARN, dropping the revision."""
    name = extract_name_from_arn(task_definition_arn)
    return name.rsplit(":", 1)[0]


def extract_running_containers(containers: Sequence[Any]) -> list[str]:
    """Names of the containers whose last known status is RUNNING."""
    return [container["name"] for container in containers if container.get("lastStatus") == "RUNNING"]


def batch_items(items: Sequence[T], batch_size: int) -> Iterator[list[T]]:
    for start in range(0, len(items), batch_size):
        yield list(items[start : start + batch_size])


def print_error(message: str) -> None:
    err_console.print(f"❌ {message}", style="red", markup=False)


@contextmanager
def show_spinner() -> Iterator[None]:
    """Context manager that shows a spinner while running operations."""
    spinner = Spinner("dots", style="cyan")
    with console.status(spinner):
        yield


def paginate_aws_list(
    client: ECSClient,
    operation_name: Literal["list_clusters", "list_tasks"],
    result_key: str,
    **kwargs: str,
) -> list[str]:
    paginator = client.get_paginator(operation_name)  # type: ignore[no-matching-overload]
    page_iterator = paginator.paginate(**kwargs)

    results: list[str] = []
    for page in page_iterator:
        results.extend(page.get(result_key, []))

    return results
