"""Type definitions for ecssh."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypedDict

from .utils import extract_name_from_arn


class ClusterInfo(TypedDict):
    name: str
    status: str
    running_tasks_count: int


@dataclass(frozen=True)
class TaskInfo:
    """A running task with its running containers."""

    task_arn: str
    task_definition_name: str
    container_names: tuple[str, ...]

    @property
    def task_id(self) -> str:
        return extract_name_from_arn(self.task_arn)


@dataclass(frozen=True)
class SelectionChoice:
    label: str
    value: Any


@dataclass(frozen=True)
class SessionHandoff:
    """Payloads handed to session-manager-plugin for one exec session."""

    session_json: str
    target: str
    target_json: str
