"""Existence and version probes for development tools.

Each tool is described by a ``ToolSpec``. Primary tools (Node.js, Python 3,
Git) decide the pass/fail total. Companion tools (npm, pip3) are only probed
when their parent primary tool was found, and never change the counters.

Probing never raises for a missing tool: absence is recorded as a
``ToolCheckResult`` with ``installed=False``.
"""

import os
import shutil
import subprocess
from collections.abc import Callable
from dataclasses import dataclass, field

PROBE_TIMEOUT_SECONDS = 10


@dataclass(frozen=True)
class ToolSpec:
    """Declarative description of one probe.

    Attributes:
        name: Short name used in the summary (e.g. "npm").
        label: Name shown on the status line (e.g. "npm (Node Package Manager)").
        command: Executable looked up on PATH.
        version_args: Arguments that make the tool print its version.
        merge_stderr: Capture stderr together with stdout.
        first_line_only: Keep only the first line of the version output.
        version_prefix: Prepended to the version in the summary (e.g. "v").
        summary_text: Shown in the summary instead of the version, when set.
        parent: Name of the primary tool this companion depends on.
        section: Section title printed before a primary tool.
        missing_status: Status text printed when the tool is absent.
    """

    name: str
    label: str
    command: str
    version_args: tuple[str, ...] = ("--version",)
    merge_stderr: bool = False
    first_line_only: bool = False
    version_prefix: str = ""
    summary_text: str = ""
    parent: str | None = None
    section: str | None = None
    missing_status: str = "Not installed"

    @property
    def is_primary(self) -> bool:
        return self.parent is None


TOOLS: list[ToolSpec] = [
    ToolSpec(name="Node.js", label="Node.js", command="node", section="Node.js"),
    ToolSpec(
        name="npm",
        label="npm (Node Package Manager)",
        command="npm",
        version_prefix="v",
        parent="Node.js",
        missing_status="Not found (should come with Node.js)",
    ),
    ToolSpec(
        name="Python 3",
        label="Python 3",
        command="python3",
        merge_stderr=True,
        first_line_only=True,
        section="Python",
    ),
    ToolSpec(
        name="pip3",
        label="pip3 (Python Package Manager)",
        command="pip3",
        merge_stderr=True,
        first_line_only=True,
        summary_text="Installed",
        parent="Python 3",
        missing_status="Not found (should come with Python 3)",
    ),
    ToolSpec(name="Git", label="Git", command="git", section="Git"),
]


@dataclass(frozen=True)
class ToolCheckResult:
    """Outcome of probing one tool.

    ``version``, ``path`` and ``error`` are empty when ``installed`` is False.
    """

    name: str
    label: str
    installed: bool
    primary: bool
    version: str = ""
    path: str = ""
    error: str = ""
    version_prefix: str = ""
    summary_text: str = ""


@dataclass
class ValidationReport:
    """Results of one run, in the order the probes completed."""

    total: int
    results: list[ToolCheckResult] = field(default_factory=list)
    installed: int = 0
    missing: int = 0

    @property
    def all_installed(self) -> bool:
        return self.missing == 0

    def record(self, result: ToolCheckResult) -> None:
        """Append a result, counting it only if it is a primary tool."""
        self.results.append(result)
        if not result.primary:
            return
        if result.installed:
            self.installed += 1
        else:
            self.missing += 1

    def is_installed(self, name: str) -> bool:
        return any(r.name == name and r.installed for r in self.results)


def _normalise_output(output: str, first_line_only: bool) -> str:
    """Trim version output, optionally down to its first line."""
    output = output.strip()
    if first_line_only:
        return output.splitlines()[0].strip() if output else ""
    return output


def _read_version(spec: ToolSpec, path: str) -> tuple[str, str]:
    """Run the tool's version command.

    Args:
        spec: The tool being probed.
        path: The resolved executable.

    Returns:
        Tuple of (version, error). ``error`` is empty when the command
        exited cleanly.
    """
    flags = " ".join(spec.version_args)
    try:
        completed = subprocess.run(
            [path, *spec.version_args],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if spec.merge_stderr else subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=PROBE_TIMEOUT_SECONDS,
        )
    except subprocess.TimeoutExpired:
        return "unknown", f"{flags} timed out after {PROBE_TIMEOUT_SECONDS}s"
    except OSError as exc:
        return "unknown", f"{flags} could not be run: {exc.strerror or exc}"

    version = _normalise_output(completed.stdout or "", spec.first_line_only) or "unknown"
    if completed.returncode != 0:
        return version, f"{flags} exited with status {completed.returncode}"
    return version, ""


def probe_tool(spec: ToolSpec) -> ToolCheckResult:
    """Check whether a tool is on PATH and, if so, which version it is.

    Args:
        spec: The tool to probe.

    Returns:
        The result of the probe. A tool that cannot be resolved on PATH
        gives ``installed=False``; this is not an error.
    """
    path = shutil.which(spec.command)
    if path is None:
        return ToolCheckResult(
            name=spec.name,
            label=spec.label,
            installed=False,
            primary=spec.is_primary,
        )

    path = os.path.abspath(path)
    version, error = _read_version(spec, path)
    return ToolCheckResult(
        name=spec.name,
        label=spec.label,
        installed=True,
        primary=spec.is_primary,
        version=version,
        path=path,
        error=error,
        version_prefix=spec.version_prefix,
        summary_text=spec.summary_text,
    )


def run_probes(
    specs: list[ToolSpec] | None = None,
    on_result: Callable[[ToolSpec, ToolCheckResult], None] | None = None,
) -> ValidationReport:
    """Probe every tool in order and collect the results.

    Companions whose parent is missing are skipped entirely: they are not
    probed, not reported and not counted.

    Args:
        specs: Tools to probe. Defaults to TOOLS.
        on_result: Called with each result as soon as it is available, so
            the caller can stream output.

    Returns:
        The populated ValidationReport.
    """
    if specs is None:
        specs = TOOLS

    report = ValidationReport(total=sum(1 for s in specs if s.is_primary))

    for spec in specs:
        if not spec.is_primary and not report.is_installed(spec.parent):
            continue

        result = probe_tool(spec)
        report.record(result)
        if on_result is not None:
            on_result(spec, result)

    return report
