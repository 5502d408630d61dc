"""Selection utilities for UI components."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.console import Console

from .errors import NoChoicesError
from .types import SelectionChoice

console = Console()


def select_from_list(prompt: str, labels: Sequence[str], subject: str, prompt_console: Console | None = None) -> int:
    """Prompt for a 1-based selection and return its 0-based index.

    Re-prompts on unparsable or out-of-range input until a valid index is read.
    EOFError from a closed input stream is not handled here.
    """
    if not labels:
        raise NoChoicesError(subject)

    out = prompt_console or console
    out.print(prompt, style="bold")
    for index, label in enumerate(labels, start=1):
        out.print(f"{index}) {label}", markup=False, highlight=False)

    while True:
        raw = out.input("> ").strip()
        try:
            selection = int(raw)
        except ValueError:
            selection = 0

        if 1 <= selection <= len(labels):
            return selection - 1

        out.print(f"Invalid selection (1-{len(labels)})", style="yellow")


def resolve_selection(
    prompt: str,
    choices: Sequence[SelectionChoice],
    subject: str,
    force: bool = False,
    prompt_console: Console | None = None,
) -> Any:  # noqa: ANN401
    """Pick one choice: forced or single choices resolve without prompting."""
    if not choices:
        raise NoChoicesError(subject)

    if force or len(choices) == 1:
        return choices[0].value

    index = select_from_list(prompt, [choice.label for choice in choices], subject, prompt_console)
    return choices[index].value


def select_container(container_names: Sequence[str], force: bool, prompt_console: Console | None = None) -> str:
    choices = [SelectionChoice(label=name, value=name) for name in container_names]
    return resolve_selection("Select container:", choices, "container", force, prompt_console)
