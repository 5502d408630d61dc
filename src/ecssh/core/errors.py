"""Errors raised while resolving a container and handing off the exec session."""

from __future__ import annotations


class EcsshError(Exception):
    """Base class for every failure reported to the operator."""


class AWSRequestError(EcsshError):
    def __init__(self, operation: str, detail: str) -> None:
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation} failed: {detail}")


class SessionRequestError(AWSRequestError):
    def __init__(self, cluster: str, task_arn: str, container_name: str, detail: str) -> None:
        self.cluster = cluster
        self.task_arn = task_arn
        self.container_name = container_name
        super().__init__("ExecuteCommand", detail)


class NoClustersError(EcsshError):
    def __init__(self) -> None:
        super().__init__("no ECS clusters found")


class NoRunningTasksError(EcsshError):
    def __init__(self, cluster: str) -> None:
        self.cluster = cluster
        super().__init__(f"no running tasks in cluster {cluster}")


class NoMatchingTasksError(EcsshError):
    def __init__(self, cluster: str, pattern: str) -> None:
        self.cluster = cluster
        self.pattern = pattern
        super().__init__(f"no tasks matching '{pattern}' in cluster {cluster}")


class NoChoicesError(EcsshError):
    def __init__(self, subject: str) -> None:
        self.subject = subject
        super().__init__(f"no {subject}s available")


class TaskNotFoundError(EcsshError):
    def __init__(self, cluster: str, task_arn: str) -> None:
        self.cluster = cluster
        self.task_arn = task_arn
        super().__init__(f"task {task_arn} not found in cluster {cluster}")


class RuntimeIdNotFoundError(EcsshError):
    def __init__(self, cluster: str, task_arn: str, container_name: str) -> None:
        self.cluster = cluster
        self.task_arn = task_arn
        self.container_name = container_name
        super().__init__(f"runtime ID not found for container {container_name}")


class SerializationError(EcsshError):
    def __init__(self, payload: str, detail: str) -> None:
        self.payload = payload
        self.detail = detail
        super().__init__(f"failed to marshal {payload}: {detail}")


class PluginLaunchError(EcsshError):
    def __init__(self, executable: str, detail: str) -> None:
        self.executable = executable
        self.detail = detail
        super().__init__(f"failed to start {executable}: {detail}")
