"""
Error Handler for scanscripts
Reports fatal errors and interruptions before the process exits.
"""

import logging
import sys
from typing import Optional

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ErrorHandler:
    """Centralized error handling and graceful shutdown management."""

    def __init__(self, status_dispatcher):
        self.status_dispatcher = status_dispatcher

    def handle_keyboard_interrupt(self) -> None:
        """Handle Ctrl+C gracefully."""
        self.status_dispatcher.display_info("\nExecution interrupted by user")
        sys.exit(130)

    def handle_configuration_error(self, error: ConfigurationError) -> None:
        """Handle errors that abort the script phase."""
        self.status_dispatcher.display_error(str(error))
        if error.details:
            logger.debug(f"Configuration error details: {error.details}")
        sys.exit(1)

    def handle_unexpected_error(self, error: Exception, command: Optional[str] = None) -> None:
        """Handle unexpected errors."""
        self.status_dispatcher.display_error(f"Unexpected error: {error}")
        logger.debug(f"Unexpected error while running '{command}'", exc_info=error)
        sys.exit(1)
