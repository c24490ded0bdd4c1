"""macOS Dev Tools Check - read-only report of Node.js, Python and Git on a Mac."""

from importlib.metadata import version

__version__ = version("mac-dev-tools-check")

# sys.platform value of the only supported host.
TARGET_PLATFORM = "darwin"

# Suggested one-liner printed when something is missing. Nothing runs it for you.
BREW_INSTALL_HINT = "brew install node python@3.12 git"
