"""
CLI Command Handler for scanscripts
Handles individual command execution.
"""

from typing import List

from ..core.config import ConfigManager
from ..core.runner import ScriptRunner
from ..core.selection import init_scripts
from ..models.result import RunSummary
from ..models.script import IPAddress, ScriptDescriptor


class CommandHandler:
    """Handles CLI command execution."""

    def __init__(self, config_manager: ConfigManager, runner: ScriptRunner, status_dispatcher):
        self.config_manager = config_manager
        self.runner = runner
        self.status_dispatcher = status_dispatcher

    def select_scripts(self) -> List[ScriptDescriptor]:
        """Scripts for the configured mode. ConfigurationError propagates."""
        return init_scripts(self.config_manager.get_mode(), **self.config_manager.get_scripts_config())

    def run_scripts(self, ip: IPAddress, open_ports: List[int]) -> RunSummary:
        """Run the selected scripts against one address."""
        scripts = self.select_scripts()
        summary = RunSummary(target=str(ip))

        self.status_dispatcher.start_run(str(ip), len(scripts), self.config_manager.get_mode().value)
        summary.results.extend(self.runner.run_all(scripts, ip, open_ports))
        self.status_dispatcher.finish_run(summary)
        return summary

    def list_scripts(self) -> List[ScriptDescriptor]:
        """Show the scripts the configured mode would run."""
        scripts = self.select_scripts()
        self.status_dispatcher.display_scripts(scripts)
        return scripts

    def execute_command(self, args) -> None:
        if args.command == 'run':
            self.run_scripts(args.ip, args.ports)
        elif args.command == 'list':
            self.list_scripts()
