"""Implementation of the validate-tools command.

Checks the host for Node.js (with npm), Python 3 (with pip3) and Git, and
prints a colour-coded report. Nothing is installed or modified.

The run is structured as guard -> probe -> report:

1. require_supported_platform() stops immediately on anything but macOS.
2. run_probes() checks each tool once, streaming a status line per probe.
3. print_summary() and print_outcome() replay the results and set the
   exit status: 0 when every primary tool is present, 1 otherwise.

Usage:
    validate-tools
"""

import sys

from mac_dev_tools_check.probes import run_probes
from mac_dev_tools_check.report import print_header, print_outcome, print_result, print_summary
from mac_dev_tools_check.system import describe_system, require_supported_platform


def run_validate() -> None:
    """Run every probe, print the report and exit with the overall status."""
    require_supported_platform()

    print_header(describe_system())

    report = run_probes(on_result=print_result)

    print_summary(report)
    print_outcome(report)

    sys.exit(0 if report.all_installed else 1)
