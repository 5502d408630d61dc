"""Base classes for AWS services and UI components."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from rich.console import Console

from .navigation import resolve_selection, select_from_list
from .types import SelectionChoice

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient


class BaseAWSService:
    """Base class for AWS service interactions with common patterns."""

    def __init__(self, ecs_client: ECSClient) -> None:
        self.ecs_client = ecs_client


class BaseUIComponent:
    """Base class for UI components with common patterns."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def select(
        self, prompt: str, choices: Sequence[SelectionChoice], subject: str, force: bool = False
    ) -> Any:  # noqa: ANN401
        """Forced or single choices resolve without prompting."""
        return resolve_selection(prompt, choices, subject, force, self.console)

    def prompt_choice(self, prompt: str, choices: Sequence[SelectionChoice], subject: str) -> Any:  # noqa: ANN401
        """Always ask, even when there is a single choice."""
        index = select_from_list(prompt, [choice.label for choice in choices], subject, self.console)
        return choices[index].value
