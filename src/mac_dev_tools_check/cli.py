"""CLI entry point for validate-tools."""

import click

from mac_dev_tools_check import __version__


@click.command()
@click.version_option(version=__version__, prog_name="validate-tools")
def cli():
    """Check which macOS development tools are installed. Installs nothing."""
    from mac_dev_tools_check.validate import run_validate

    run_validate()
