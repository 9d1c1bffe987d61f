"""Console + logging telemetry. Implements TelemetryPort."""

import logging

from rich.console import Console

from type_name_linter.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """Prints status lines with rich and mirrors them to the project logger."""

    def __init__(self, project_name: str, color: str, welcome: str, quiet: bool = False) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome = welcome
        self.quiet = quiet
        self.console = Console(stderr=True)
        self.logger = logging.getLogger(project_name.lower())

    def handshake(self) -> None:
        self.logger.info("%s: %s", self.project_name, self.welcome)
        if not self.quiet:
            self.console.print(f"[bold {self.color}][{self.project_name}][/] {self.welcome}")

    def step(self, message: str) -> None:
        self.logger.info(message)
        if not self.quiet:
            self.console.print(f"[{self.color}]>[/] {message}")

    def warning(self, message: str) -> None:
        self.logger.warning(message)
        self.console.print(f"[yellow]WARNING[/] {message}")

    def error(self, message: str) -> None:
        self.logger.error(message)
        self.console.print(f"[bold red]ERROR[/] {message}")

    def debug(self, message: str) -> None:
        self.logger.debug(message)
