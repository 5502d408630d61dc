"""ECS Exec session brokering."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from botocore.exceptions import BotoCoreError, ClientError

from ...core.base import BaseAWSService
from ...core.errors import SerializationError, SessionRequestError
from ...core.types import SessionHandoff
from ...core.utils import extract_name_from_arn

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient

    from ..task.task import TaskService

SHELL_COMMAND = "/bin/bash"


class SessionService(BaseAWSService):
    """Requests exec sessions and builds the session-manager-plugin payloads."""

    def __init__(self, ecs_client: ECSClient, task_service: TaskService) -> None:
        super().__init__(ecs_client)
        self.task_service = task_service

    @property
    def region(self) -> str:
        return self.ecs_client.meta.region_name

    def prepare_session(self, cluster_name: str, task_arn: str, container_name: str) -> SessionHandoff:
        try:
            response = self.ecs_client.execute_command(
                cluster=cluster_name,
                task=task_arn,
                container=container_name,
                interactive=True,
                command=SHELL_COMMAND,
            )
        except (BotoCoreError, ClientError) as e:
            raise SessionRequestError(cluster_name, task_arn, container_name, str(e)) from e

        session_json = _to_json("session", response.get("session"))

        runtime_id = self.task_service.get_container_runtime_id(cluster_name, task_arn, container_name)
        target = build_target(cluster_name, task_arn, runtime_id)
        target_json = _to_json("target", {"Target": target})

        return SessionHandoff(session_json=session_json, target=target, target_json=target_json)


def build_target(cluster_name: str, task_arn: str, runtime_id: str) -> str:
    """SSM target for a container: ecs:<cluster>_<taskId>_<runtimeId>."""
    return f"ecs:{cluster_name}_{extract_name_from_arn(task_arn)}_{runtime_id}"


def _to_json(payload: str, value: Any) -> str:  # noqa: ANN401
    if value is None:
        raise SerializationError(payload, "missing from response")
    try:
        return json.dumps(value)
    except (TypeError, ValueError) as e:
        raise SerializationError(payload, str(e)) from e
