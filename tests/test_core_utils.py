"""Tests for core utility functions."""

import time

from ecssh.core.utils import (
    batch_items,
    extract_name_from_arn,
    extract_running_containers,
    extract_task_definition_name,
    paginate_aws_list,
    print_error,
    show_spinner,
)


def test_extract_name_from_arn():
    assert extract_name_from_arn("arn:aws:ecs:us-east-1:123456789012:cluster/production") == "production"
    assert extract_name_from_arn("arn:aws:ecs:us-east-1:123456789012:task/production/abc123def456") == "abc123def456"
    assert extract_name_from_arn("just-a-name") == "just-a-name"


def test_extract_task_definition_name_strips_revision():
    arn = "arn:aws:ecs:us-east-1:123456789012:task-definition/web-app:3"
    assert extract_task_definition_name(arn) == "web-app"


def test_extract_task_definition_name_without_revision():
    assert extract_task_definition_name("arn:aws:ecs:us-east-1:123:task-definition/web-app") == "web-app"
    assert extract_task_definition_name("web-app") == "web-app"


def test_extract_task_definition_name_uses_last_colon():
    assert extract_task_definition_name("family/with:colon:12") == "with:colon"


def test_extract_running_containers_keeps_order_and_running_only():
    containers = [
        {"name": "web", "lastStatus": "RUNNING"},
        {"name": "init", "lastStatus": "STOPPED"},
        {"name": "pending", "lastStatus": "PENDING"},
        {"name": "sidecar", "lastStatus": "RUNNING"},
    ]

    assert extract_running_containers(containers) == ["web", "sidecar"]


def test_extract_running_containers_excludes_missing_status_and_other_case():
    containers = [
        {"name": "no-status"},
        {"name": "null-status", "lastStatus": None},
        {"name": "lowercase", "lastStatus": "running"},
    ]

    assert extract_running_containers(containers) == []


def test_extract_running_containers_empty_input():
    assert extract_running_containers([]) == []


def test_show_spinner():
    with show_spinner():
        time.sleep(0.01)


def test_paginate_aws_list_multiple_pages(mock_paginated_client):
    pages = [
        {"taskArns": ["arn:1", "arn:2"]},
        {"taskArns": ["arn:3"]},
    ]
    mock_client = mock_paginated_client(pages)

    result = paginate_aws_list(mock_client, "list_tasks", "taskArns", cluster="production")

    assert result == ["arn:1", "arn:2", "arn:3"]
    mock_client.get_paginator.assert_called_once_with("list_tasks")
    mock_client.get_paginator.return_value.paginate.assert_called_once_with(cluster="production")


def test_paginate_aws_list_missing_key(mock_paginated_client):
    mock_client = mock_paginated_client([{}])

    assert paginate_aws_list(mock_client, "list_clusters", "clusterArns") == []


def test_print_error_goes_to_stderr(capsys):
    print_error("Something went wrong")
    captured = capsys.readouterr()
    assert "Something went wrong" in captured.err


def test_print_error_keeps_bracketed_text(capsys):
    print_error("Error: no tasks matching '[/x]' in cluster [web]")
    captured = capsys.readouterr()
    assert "no tasks matching '[/x]' in cluster [web]" in captured.err


def test_batch_items_partial_last_batch():
    assert list(batch_items([1, 2, 3, 4, 5, 6, 7], 3)) == [[1, 2, 3], [4, 5, 6], [7]]


def test_batch_items_empty_list():
    assert list(batch_items([], 5)) == []
