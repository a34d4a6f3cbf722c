"""
Application Controller for scanscripts
Coordinates all components and manages application lifecycle.
"""

from typing import List, Optional

from .. import __version__
from ..cli.commands import CommandHandler
from ..cli.parser import ArgumentParser
from ..logger import setup_logging
from .config import ConfigManager
from .error_handler import ErrorHandler
from ..exceptions import ConfigurationError
from .runner import ScriptRunner
from .status import StatusDispatcher


class ScanScriptsApp:
    """Main application controller that orchestrates all components."""

    def __init__(self, status_dispatcher: Optional[StatusDispatcher] = None):
        self.argument_parser = ArgumentParser()
        self.status_dispatcher = status_dispatcher or StatusDispatcher()
        self.error_handler = ErrorHandler(self.status_dispatcher)
        self.config_manager = None

    def _load_config(self, args) -> ConfigManager:
        config_manager = ConfigManager(args.config)
        config_manager.apply_overrides(
            mode=args.scripts.value if args.scripts else None,
            home_dir=args.home,
            log_level="DEBUG" if args.debug else None
        )
        return config_manager

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Main application entry point."""
        args = self.argument_parser.parse_arguments(argv)

        if args.version:
            self.status_dispatcher.display_version(__version__, "scanscripts")
            return 0

        if not args.command:
            self.argument_parser.create_parser().print_help()
            return 0

        self.config_manager = self._load_config(args)
        setup_logging(self.config_manager.get_log_level())

        command_handler = CommandHandler(
            self.config_manager,
            ScriptRunner(status_dispatcher=self.status_dispatcher),
            self.status_dispatcher
        )

        try:
            command_handler.execute_command(args)
        except KeyboardInterrupt:
            self.error_handler.handle_keyboard_interrupt()
        except ConfigurationError as e:
            self.error_handler.handle_configuration_error(e)
        except Exception as e:
            self.error_handler.handle_unexpected_error(e, args.command)
        return 0
