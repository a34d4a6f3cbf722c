"""
Status display and console output management.
"""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models.result import RunSummary, ScriptResult
from ..models.script import ScriptDescriptor


class StatusDispatcher:
    """Manages console output and status display."""

    def __init__(self, silent: bool = False, console: Optional[Console] = None):
        self.silent = silent
        self.console = console or Console()
        self.error_console = Console(stderr=True) if console is None else console

    def start_run(self, target: str, script_count: int, mode: str) -> None:
        if not self.silent:
            self.console.print(f"[bold cyan]Running {script_count} script(s) ({mode}) against {target}[/bold cyan]")

    def script_starting(self, name: str, target: str) -> None:
        """Display script starting message."""
        if not self.silent:
            self.console.print(f"[→] {escape(name)} on {target}...")

    def script_completed(self, result: ScriptResult) -> None:
        """Display script completion message."""
        if self.silent:
            return
        if result.success:
            self.console.print(f"[green][✓] {escape(result.name)} completed successfully[/green]")
            if result.output:
                self.console.print(result.output, markup=False, highlight=False)
        else:
            self.console.print(f"[red][✗] {escape(result.name)} failed: {escape(result.error_message or '')}[/red]")

    def finish_run(self, summary: RunSummary) -> None:
        if not self.silent:
            self.console.print()
            self.console.print("--- Script Summary ---")
            self.console.print(f"Total scripts: {summary.total}")
            self.console.print(f"Successful: {summary.successful}")
            self.console.print(f"Failed: {summary.failed}")

    def display_scripts(self, scripts: List[ScriptDescriptor]) -> None:
        """Show the scripts that would run as a table."""
        if not scripts:
            self.console.print("[yellow]No scripts selected[/yellow]")
            return

        table = Table(show_header=True, header_style="bold blue")
        table.add_column("No.", justify="right")
        table.add_column("Script", no_wrap=True)
        table.add_column("Tags")
        table.add_column("Port")
        table.add_column("Call format")

        for idx, script in enumerate(scripts, start=1):
            table.add_row(
                str(idx),
                escape(script.name),
                escape(", ".join(script.tags or [])),
                escape(script.trigger_port or ""),
                escape(script.call_format) if script.call_format else "[red]missing[/red]"
            )
        self.console.print(table)

    def display_error(self, message: str) -> None:
        self.error_console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)

    def display_info(self, message: str) -> None:
        if not self.silent:
            self.console.print(message)

    def display_version(self, version: str, name: str) -> None:
        self.console.print(f"{name} {version}")
