import argparse
import os
import sys
from collections.abc import Callable
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

if TYPE_CHECKING:
    from mypy_boto3_ecs import ECSClient

from .aws_service import ECSService
from .core.app import run_connect, run_interactive
from .core.errors import EcsshError
from .core.utils import print_error
from .ui import ECSNavigator

try:
    __version__ = version("ecssh")
except PackageNotFoundError:
    __version__ = "dev"

CLUSTER_ENV_VAR = "ECSSH_CLUSTER_ID"
TASK_NAME_ENV_VAR = "ECSSH_TASK_NAME"

USAGE_EXAMPLES = f"""\
subcommands:
  list                   list all available ECS clusters (default)
  list clusters          list all available ECS clusters
  list tasks CLUSTER     list all running tasks in a cluster
  help                   show this help message

environment variables:
  {CLUSTER_ENV_VAR}       ECS cluster name or ARN
  {TASK_NAME_ENV_VAR}        task definition name pattern to search for

examples:
  ecssh                          # interactive mode
  ecssh list tasks my-cluster    # list tasks in cluster
  ecssh my-cluster web-app       # connect to container
  ecssh -f my-cluster web-app    # connect to the first running container
"""


def _build_connect_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecssh",
        description="Open a shell in a running ECS container via ECS Exec",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"ecssh {__version__}")
    parser.add_argument("--profile", help="AWS profile to use for authentication", type=str, default=None)
    parser.add_argument("-f", "--force", action="store_true", help="connect to the first available container")
    parser.add_argument("-v", "--verbose", action="store_true", help="show verbose output during execution")
    parser.add_argument("cluster", nargs="?", help="ECS cluster name or ARN")
    parser.add_argument("task_name", nargs="?", help="task definition name pattern")
    return parser


def _build_list_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ecssh list", description="List ECS clusters or running tasks")
    parser.add_argument("--profile", help="AWS profile to use for authentication", type=str, default=None)
    parser.add_argument("resource", nargs="?", choices=["clusters", "tasks"], default="clusters")
    parser.add_argument("cluster", nargs="?", help="cluster to list tasks for")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Connect to ECS containers with ECS Exec."""
    args = sys.argv[1:] if argv is None else argv
    connect_parser = _build_connect_parser()

    if args and args[0] == "help":
        connect_parser.print_help()
        return

    if args and args[0] == "list":
        list_parser = _build_list_parser()
        options = list_parser.parse_args(args[1:])
        if options.resource == "tasks" and not options.cluster:
            list_parser.error("cluster ID required for listing tasks")
        sys.exit(_run(lambda navigator: _list(navigator, options.resource, options.cluster), options.profile))

    options = connect_parser.parse_args(args)
    cluster, task_name = _resolve_target(options.cluster, options.task_name)

    if not cluster and not task_name:
        if options.force or options.verbose:
            connect_parser.error("-f and -v require CLUSTER and TASK_NAME")
        sys.exit(_run(run_interactive, options.profile))

    if not cluster or not task_name:
        connect_parser.error("both CLUSTER and TASK_NAME are required")

    sys.exit(
        _run(
            lambda navigator: run_connect(navigator, cluster, task_name, options.force, options.verbose),
            options.profile,
        )
    )


def _resolve_target(cluster: str | None, task_name: str | None) -> tuple[str, str]:
    """Fill missing positional values from the environment."""
    return cluster or os.environ.get(CLUSTER_ENV_VAR, ""), task_name or os.environ.get(TASK_NAME_ENV_VAR, "")


def _list(navigator: ECSNavigator, resource: str, cluster: str | None) -> int:
    if resource == "tasks" and cluster:
        navigator.display_tasks(cluster)
    else:
        navigator.display_clusters()
    return 0


def _run(command: Callable[[ECSNavigator], int], profile_name: str | None) -> int:
    try:
        ecs_client = _create_aws_client(profile_name)
    except (BotoCoreError, ClientError) as e:
        print_error(f"Error initializing AWS client: {e}")
        return 1

    navigator = ECSNavigator(ECSService(ecs_client), profile_name)
    try:
        return command(navigator)
    except EcsshError as e:
        print_error(f"Error: {e}")
    except EOFError:
        print_error("Error: input stream closed")
    return 1


def _create_aws_client(profile_name: str | None) -> "ECSClient":
    """Create AWS ECS client; API errors surface immediately without retries."""
    config = Config(
        max_pool_connections=5,
        retries={"max_attempts": 1, "mode": "standard"},
    )

    session = boto3.Session(profile_name=profile_name) if profile_name else boto3
    return session.client("ecs", config=config)


if __name__ == "__main__":
    main()
