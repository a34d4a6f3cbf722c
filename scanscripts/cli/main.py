"""
Main CLI entry point for scanscripts
Minimal entry point that delegates to the application controller.
"""

import sys

from ..core.app import ScanScriptsApp


def main(argv=None) -> int:
    """Entry point for the application."""
    app = ScanScriptsApp()
    return app.run(argv)


if __name__ == "__main__":
    sys.exit(main())
