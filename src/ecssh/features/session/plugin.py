"""Launching and supervising session-manager-plugin."""

from __future__ import annotations

import shutil
import subprocess
import sys
import threading
from typing import TYPE_CHECKING, TextIO

from ...core.errors import PluginLaunchError
from .relay import FilteredLineWriter, relay_stream

if TYPE_CHECKING:
    from ...core.types import SessionHandoff

PLUGIN_NAME = "session-manager-plugin"
WINDOWS_PLUGIN_NAME = "session-manager-plugin.exe"
OPERATION_NAME = "StartSession"


def resolve_plugin_executable(platform: str = sys.platform) -> str:
    """Best-effort plugin name; a missing binary only fails at launch."""
    if platform == "win32" and shutil.which(PLUGIN_NAME) is None and shutil.which(WINDOWS_PLUGIN_NAME):
        return WINDOWS_PLUGIN_NAME
    return PLUGIN_NAME


def build_endpoint_url(region: str) -> str:
    return f"https://ecs.{region}.amazonaws.com"


def build_plugin_command(
    executable: str, handoff: SessionHandoff, region: str, profile: str | None = None
) -> list[str]:
    return [
        executable,
        handoff.session_json,
        region,
        OPERATION_NAME,
        profile or "",
        handoff.target_json,
        build_endpoint_url(region),
    ]


def run_session_manager_plugin(
    handoff: SessionHandoff, region: str, profile: str | None = None, stderr: TextIO | None = None
) -> int:
    """Run the plugin attached to this terminal and return its exit code.

    stdin and stdout are inherited; stderr is relayed through a filter thread
    that is joined before returning. Death by signal N is reported as 128 + N,
    the way shells report it.
    """
    executable = resolve_plugin_executable()
    command = build_plugin_command(executable, handoff, region, profile)

    try:
        process = subprocess.Popen(command, stderr=subprocess.PIPE)
    except OSError as e:
        raise PluginLaunchError(executable, str(e)) from e

    writer = FilteredLineWriter(stderr or sys.stderr)
    relay = threading.Thread(target=relay_stream, args=(process.stderr, writer), daemon=True)
    relay.start()

    returncode = process.wait()
    relay.join()
    if returncode < 0:
        return 128 - returncode
    return returncode
