"""Tests for TaskUI class."""

from unittest.mock import Mock, patch

import pytest

from ecssh.core.errors import NoMatchingTasksError, NoRunningTasksError
from ecssh.core.types import TaskInfo
from ecssh.features.task.task import TaskService
from ecssh.features.task.ui import TaskUI

WEB_1 = TaskInfo("arn:aws:ecs:us-east-1:123:task/prod/web1", "web-app", ("web", "sidecar"))
WEB_2 = TaskInfo("arn:aws:ecs:us-east-1:123:task/prod/web2", "web-app", ("web",))
WORKER = TaskInfo("arn:aws:ecs:us-east-1:123:task/prod/wrk1", "worker", ("worker",))


@pytest.fixture
def task_ui(mock_ecs_client):
    """Create a TaskUI instance with mocked service."""
    return TaskUI(TaskService(mock_ecs_client), Mock())


@patch("ecssh.core.base.select_from_list", return_value=0)
def test_select_task_prompts_definition_then_task(mock_select, task_ui):
    task_ui.task_service.get_running_tasks = Mock(return_value=[WEB_1, WORKER, WEB_2])
    task_ui.console.input.return_value = "2"

    assert task_ui.select_task("prod") == WEB_2

    assert mock_select.call_args[0][1] == ["web-app (2 tasks)", "worker (1 tasks)"]
    task_ui.console.print.assert_any_call("1) web1 - Containers: web, sidecar", markup=False, highlight=False)
    task_ui.console.print.assert_any_call("2) web2 - Containers: web", markup=False, highlight=False)


@patch("ecssh.core.base.select_from_list", return_value=1)
def test_select_task_single_task_in_group_is_auto_selected(mock_select, task_ui):
    task_ui.task_service.get_running_tasks = Mock(return_value=[WEB_1, WORKER])

    assert task_ui.select_task("prod") == WORKER
    mock_select.assert_called_once()


def test_select_task_no_running_tasks(task_ui):
    task_ui.task_service.get_running_tasks = Mock(return_value=[])

    with pytest.raises(NoRunningTasksError) as exc_info:
        task_ui.select_task("prod")

    assert exc_info.value.cluster == "prod"


def test_find_task_returns_first_match(task_ui):
    task_ui.task_service.get_running_tasks = Mock(return_value=[WORKER, WEB_1, WEB_2])

    assert task_ui.find_task("prod", "web-app") == WEB_1


def test_find_task_verbose_output(task_ui):
    task_ui.task_service.get_running_tasks = Mock(return_value=[WEB_1])

    task_ui.find_task("prod", "web-app", verbose=True)

    task_ui.console.print.assert_any_call("Found matching task: web1", style="dim")
    task_ui.console.print.assert_any_call("Found 2 running container(s)", style="dim")


def test_find_task_no_match(task_ui):
    task_ui.task_service.get_running_tasks = Mock(return_value=[WORKER])

    with pytest.raises(NoMatchingTasksError):
        task_ui.find_task("prod", "web-app")


def test_display_tasks_prints_table(task_ui):
    task_ui.task_service.get_running_tasks = Mock(return_value=[WEB_1, WORKER])

    task_ui.display_tasks("prod")

    table = task_ui.console.print.call_args[0][0]
    assert table.row_count == 2
    assert table.title == "Running tasks in cluster: prod"
