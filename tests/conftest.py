"""Shared pytest fixtures for tests."""

from unittest.mock import Mock

import pytest

TASK_DEFINITION_ARN = "arn:aws:ecs:us-east-1:123456789012:task-definition/web-app:3"


@pytest.fixture
def mock_paginated_client():
    def _create_client(pages: list[dict]) -> Mock:
        client = Mock()
        paginator = Mock()
        paginator.paginate.return_value = pages
        client.get_paginator.return_value = paginator
        return client

    return _create_client


@pytest.fixture
def mock_ecs_client():
    return Mock()


@pytest.fixture
def make_task():
    def _make_task(task_id: str, containers: list[dict], task_definition_arn: str = TASK_DEFINITION_ARN) -> dict:
        return {
            "taskArn": f"arn:aws:ecs:us-east-1:123456789012:task/prod/{task_id}",
            "taskDefinitionArn": task_definition_arn,
            "containers": containers,
        }

    return _make_task
