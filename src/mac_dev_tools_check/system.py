"""Host platform checks.

The report only makes sense on macOS, so the platform guard runs before any
tool is probed. ``describe_system`` gathers the details printed in the
report header.
"""

import platform
import subprocess
import sys
from dataclasses import dataclass

import click

from mac_dev_tools_check import TARGET_PLATFORM

SW_VERS_TIMEOUT_SECONDS = 5


@dataclass(frozen=True)
class SystemInfo:
    """What the report header says about the host.

    Attributes:
        os_name: Product name (e.g. "macOS").
        os_version: Product version (e.g. "14.4.1").
        architecture: CPU architecture (e.g. "arm64").
    """

    os_name: str
    os_version: str
    architecture: str


def is_supported_platform() -> bool:
    """Return True when running on macOS."""
    return sys.platform.startswith(TARGET_PLATFORM)


def require_supported_platform() -> None:
    """Exit with an error unless running on macOS."""
    if is_supported_platform():
        return

    click.echo(click.style("Error: This script is designed for macOS only.", fg="red"), err=True)
    sys.exit(1)


def _sw_vers(flag: str) -> str | None:
    """Read one field from sw_vers.

    Args:
        flag: The sw_vers option (e.g. "-productVersion").

    Returns:
        The trimmed value, or None if sw_vers could not be run.
    """
    try:
        result = subprocess.run(
            ["sw_vers", flag],
            capture_output=True,
            text=True,
            check=True,
            timeout=SW_VERS_TIMEOUT_SECONDS,
        )
    except (FileNotFoundError, subprocess.CalledProcessError, subprocess.TimeoutExpired):
        return None
    return result.stdout.strip() or None


def describe_system() -> SystemInfo:
    """Collect the OS name, OS version and CPU architecture of the host."""
    os_name = _sw_vers("-productName") or "macOS"
    os_version = _sw_vers("-productVersion") or platform.mac_ver()[0] or "unknown"
    architecture = platform.machine() or "unknown"
    return SystemInfo(os_name=os_name, os_version=os_version, architecture=architecture)
