"""Output formatting utilities"""

import json
import sys
from typing import Any

from rich.console import Console
from rich.table import Table


class OutputFormatter:
    """Handles output formatting for JSON and human-readable modes"""

    def __init__(self, json_mode: bool = False, console: Console | None = None):
        """Initialize output formatter

        Args:
            json_mode: Enable JSON output mode
            console: Rich console instance (for human mode)
        """
        self.json_mode = json_mode
        self.console = console or Console()
        self.err_console = Console(stderr=True)

    def success(self, message: str, data: Any = None) -> None:
        """Output success message with optional key/value data"""
        if self.json_mode:
            print(json.dumps({"status": "success", "message": message, "data": data}, indent=2))
            return

        self.console.print(f"[green]✓[/green] {message}")
        if data and isinstance(data, dict):
            for key, value in data.items():
                self.console.print(f"  {key}: {value}")

    def error(self, message: str, details: str | None = None) -> None:
        """Output error message to stderr"""
        if self.json_mode:
            output = {"status": "error", "message": message, "details": details}
            print(json.dumps(output, indent=2), file=sys.stderr)
            return

        self.err_console.print(f"[red]✗[/red] {message}")
        if details:
            self.err_console.print(f"  {details}")

    def info(self, message: str) -> None:
        """Output info message (human mode only)"""
        if not self.json_mode:
            self.console.print(f"[blue]ℹ[/blue] {message}")

    def state(self, state: dict[str, Any]) -> None:
        """Output a sequencer state: transport line plus pattern grid"""
        if self.json_mode:
            print(json.dumps(state, indent=2))
            return

        transport = "playing" if state["playing"] else "stopped"
        self.console.print(
            f"[bold]{state['bpm']} BPM[/bold]  {transport}  step {state['current_step']}"
        )
        self.console.print(pattern_table(state))


def pattern_table(state: dict[str, Any]) -> Table:
    """Render track patterns as a grid, highlighting the playhead column"""
    table = Table(show_header=True, header_style="bold")
    table.add_column("track")
    current = state["current_step"]
    steps = len(next(iter(state["tracks"].values()))["pattern"]) if state["tracks"] else 0
    for step in range(steps):
        style = "reverse" if step == current else None
        table.add_column(f"{step + 1}", justify="center", header_style=style)
    table.add_column("params")

    for track_id, track in state["tracks"].items():
        cells = ["●" if on else "·" for on in track["pattern"]]
        params = " ".join(f"{k}={v}" for k, v in track["params"].items())
        table.add_row(track_id, *cells, params)
    return table
