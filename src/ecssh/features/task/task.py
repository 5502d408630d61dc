"""Task operations for ECS."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from botocore.exceptions import BotoCoreError, ClientError

from ...core.base import BaseAWSService
from ...core.errors import AWSRequestError, NoMatchingTasksError, RuntimeIdNotFoundError, TaskNotFoundError
from ...core.types import TaskInfo
from ...core.utils import batch_items, extract_running_containers, extract_task_definition_name, paginate_aws_list

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient
    from mypy_boto3_ecs.type_defs import TaskTypeDef

DESCRIBE_TASKS_BATCH_SIZE = 100


class TaskService(BaseAWSService):
    """Service for ECS task operations."""

    def __init__(self, ecs_client: ECSClient) -> None:
        super().__init__(ecs_client)

    def get_running_tasks(self, cluster_name: str) -> list[TaskInfo]:
        try:
            task_arns = paginate_aws_list(
                self.ecs_client, "list_tasks", "taskArns", cluster=cluster_name, desiredStatus="RUNNING"
            )
            tasks: list[TaskTypeDef] = []
            for batch in batch_items(task_arns, DESCRIBE_TASKS_BATCH_SIZE):
                response = self.ecs_client.describe_tasks(cluster=cluster_name, tasks=batch)
                tasks.extend(response.get("tasks", []))
        except (BotoCoreError, ClientError) as e:
            raise AWSRequestError("ListTasks", str(e)) from e

        return [_create_task_info(task) for task in tasks]

    def find_matching_tasks(self, cluster_name: str, pattern: str) -> list[TaskInfo]:
        """Running tasks whose definition name contains the pattern; raises when none match."""
        matching = find_matching_tasks(self.get_running_tasks(cluster_name), pattern)
        if not matching:
            raise NoMatchingTasksError(cluster_name, pattern)
        return matching

    def get_container_runtime_id(self, cluster_name: str, task_arn: str, container_name: str) -> str:
        try:
            response = self.ecs_client.describe_tasks(cluster=cluster_name, tasks=[task_arn])
        except (BotoCoreError, ClientError) as e:
            raise AWSRequestError("DescribeTasks", str(e)) from e

        tasks = response.get("tasks", [])
        if not tasks:
            raise TaskNotFoundError(cluster_name, task_arn)

        for container in tasks[0].get("containers", []):
            if container.get("name") == container_name:
                runtime_id = container.get("runtimeId")
                if runtime_id:
                    return runtime_id
                break

        raise RuntimeIdNotFoundError(cluster_name, task_arn, container_name)


def find_matching_tasks(tasks: Iterable[TaskInfo], pattern: str) -> list[TaskInfo]:
    return [task for task in tasks if pattern in task.task_definition_name]


def group_tasks_by_definition(tasks: Iterable[TaskInfo]) -> dict[str, list[TaskInfo]]:
    """Group tasks by definition name, keeping first-seen order."""
    groups: dict[str, list[TaskInfo]] = {}
    for task in tasks:
        groups.setdefault(task.task_definition_name, []).append(task)
    return groups


def _create_task_info(task: TaskTypeDef) -> TaskInfo:
    return TaskInfo(
        task_arn=task["taskArn"],
        task_definition_name=extract_task_definition_name(task["taskDefinitionArn"]),
        container_names=tuple(extract_running_containers(task.get("containers", []))),
    )
