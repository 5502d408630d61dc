"""UI components for opening exec sessions."""

from __future__ import annotations

from rich.console import Console

from ...core.base import BaseUIComponent
from ...core.utils import show_spinner
from .plugin import run_session_manager_plugin
from .session import SessionService


class SessionUI(BaseUIComponent):
    """Brokers the session and hands the terminal to session-manager-plugin."""

    def __init__(
        self, session_service: SessionService, profile: str | None = None, console: Console | None = None
    ) -> None:
        super().__init__(console)
        self.session_service = session_service
        self.profile = profile

    def connect(self, cluster_name: str, task_arn: str, container_name: str, verbose: bool = False) -> int:
        with show_spinner():
            handoff = self.session_service.prepare_session(cluster_name, task_arn, container_name)

        if verbose:
            self.console.print(f"Session target: {handoff.target}", style="dim")

        return run_session_manager_plugin(handoff, self.session_service.region, self.profile)
