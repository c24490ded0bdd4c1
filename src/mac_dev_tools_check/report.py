"""Formatting and printing of the tool report.

The ``format_*`` functions are pure and return styled strings; the
``print_*`` functions write them with click.echo. Colour always comes from
the structured ``installed`` flag of a result.
"""

import click

from mac_dev_tools_check import BREW_INSTALL_HINT
from mac_dev_tools_check.probes import ToolCheckResult, ToolSpec, ValidationReport
from mac_dev_tools_check.system import SystemInfo

RULE_WIDTH = 40
INSTALLED_GLYPH = "✅"
MISSING_GLYPH = "❌"


def _rule(char: str = "═") -> str:
    return char * RULE_WIDTH


def _boxed(text: str, **style) -> list[str]:
    """Return text between two double rules, all styled alike."""
    return [click.style(line, **style) for line in (_rule(), text, _rule())]


def format_status(label: str, installed: bool) -> str:
    """Return the coloured glyph line for a tool (e.g. "✅ Git" in green)."""
    if installed:
        return click.style(f"{INSTALLED_GLYPH} {label}", fg="green")
    return click.style(f"{MISSING_GLYPH} {label}", fg="red")


def format_summary_line(result: ToolCheckResult) -> str:
    """Return the summary line for one result (e.g. "npm: ✅ v10.2.4").

    Args:
        result: A recorded probe result.

    Returns:
        The line, coloured by ``result.installed``.
    """
    if result.installed:
        shown = result.summary_text or f"{result.version_prefix}{result.version}"
        text = f"{result.name}: {INSTALLED_GLYPH} {shown}"
        return click.style(text, fg="green")

    reason = "Not installed" if result.primary else "Not found"
    return click.style(f"{result.name}: {MISSING_GLYPH} {reason}", fg="red")


def print_header(info: SystemInfo) -> None:
    """Print the title block, host details and read-only notice."""
    click.clear()
    for line in _boxed("macOS Development Tools Validation (Read-Only)", fg="cyan"):
        click.echo(line)
    click.echo()
    click.echo(click.style(f"ℹ️  System: {info.os_name} {info.os_version}", fg="blue"))
    click.echo(click.style(f"ℹ️  Architecture: {info.architecture}", fg="blue"))
    click.echo()
    for note in (
        "Note: This script only checks what is installed.",
        "It does NOT install or modify anything.",
    ):
        click.echo(click.style(note, fg="yellow", bold=True))
    click.echo()
    click.echo("Checking installed development tools...")


def print_section(title: str) -> None:
    """Print the divider and title that open a primary tool's section."""
    click.echo(click.style(_rule("━"), fg="blue"))
    click.echo(click.style(title, fg="blue"))
    click.echo(click.style(_rule("━"), fg="blue"))


def print_result(spec: ToolSpec, result: ToolCheckResult) -> None:
    """Stream one probe result as soon as it completes.

    Primary tools open their own section; companions follow their parent
    after a blank line.
    """
    click.echo()
    if spec.section:
        print_section(spec.section)

    click.echo(format_status(result.label, result.installed))
    if result.installed:
        click.echo(f"  Version: {result.version}")
        click.echo(f"  Path: {result.path}")
        if result.error:
            click.echo(click.style(f"  Warning: {result.error}", fg="yellow"))
    else:
        click.echo(f"  Status: {spec.missing_status}")


def print_summary(report: ValidationReport) -> None:
    """Print the counts and replay every result in recorded order."""
    click.echo()
    click.echo()
    for line in _boxed("Summary", fg="cyan"):
        click.echo(line)
    click.echo()
    click.echo("Tools Status:")
    click.echo(f"  Installed: {report.installed}/{report.total}")
    click.echo(f"  Missing: {report.missing}/{report.total}")
    click.echo()
    click.echo("Detailed Results:")
    for result in report.results:
        click.echo(f"  {format_summary_line(result)}")
    click.echo()


def print_outcome(report: ValidationReport) -> None:
    """Print the all-clear banner, or the warning banner with install hints."""
    if report.all_installed:
        for line in _boxed(f"{INSTALLED_GLYPH} All required tools are installed!", fg="green"):
            click.echo(line)
        return

    for line in _boxed("⚠️  Some tools are missing", fg="yellow", bold=True):
        click.echo(line)
    click.echo()
    click.echo("Note: This script does not install anything.")
    click.echo()
    click.echo("To install missing tools manually, you can:")
    click.echo("  1. Run the setup script (if available)")
    click.echo("  2. Install manually using Homebrew:")
    click.echo(f"     {BREW_INSTALL_HINT}")
