"""Shared test fixtures."""

import subprocess

import pytest
from click.testing import CliRunner

from mac_dev_tools_check.system import SystemInfo

BIN_DIR = "/usr/local/bin"

# Version output per command, as each tool prints it.
VERSION_OUTPUT: dict[str, str] = {
    "node": "v20.11.1\n",
    "npm": "10.2.4\n",
    "python3": "Python 3.12.2\n",
    "pip3": "pip 24.0 from /usr/local/lib/python3.12/site-packages/pip (python 3.12)\n",
    "git": "git version 2.44.0\n",
}


class FakeHost:
    """Stand-in for PATH lookup and process execution.

    Commands in ``present`` resolve to BIN_DIR and print VERSION_OUTPUT
    (or an override from ``outputs``) when asked for their version.
    """

    def __init__(self, present, outputs=None):
        self.present = set(present)
        self.outputs = {**VERSION_OUTPUT, **(outputs or {})}
        self.which_calls: list[str] = []
        self.run_calls: list[list[str]] = []

    def which(self, command):
        self.which_calls.append(command)
        if command in self.present:
            return f"{BIN_DIR}/{command}"
        return None

    def run(self, cmd, **kwargs):
        self.run_calls.append(list(cmd))
        command = cmd[0].rsplit("/", 1)[-1]
        return subprocess.CompletedProcess(cmd, 0, stdout=self.outputs[command])


@pytest.fixture()
def cli_runner():
    return CliRunner()


@pytest.fixture()
def system_info():
    return SystemInfo(os_name="macOS", os_version="14.4.1", architecture="arm64")


@pytest.fixture()
def make_host():
    """Factory for FakeHost instances."""
    return FakeHost
