# Logging and console management for the Agent Network service.
# Date: 2025-06-11
# Version: 0.2.0

import logging
from typing import Any, Dict, Iterable, TYPE_CHECKING

from rich.logging import RichHandler
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from agent_network.models.common import NetworkEvent

LOGGER_NAME = "Agent-Network"

# Custom logging level for success messages, sits between INFO and WARNING
SUCCESS_LEVEL_NUM = 25

logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")


def success_log(self, message, *args, **kwargs):
    if self.isEnabledFor(SUCCESS_LEVEL_NUM):
        self._log(SUCCESS_LEVEL_NUM, message, args, **kwargs)


if not hasattr(logging.Logger, "success"):
    setattr(logging.Logger, "success", success_log)


class ConsoleManager:
    """
    Manages console output for the Agent Network service.
    Wraps a stdlib logger with a Rich handler, plus a few higher-level
    helpers for rules, tables and error panels.
    """
    def __init__(self):
        custom_theme = Theme({
            "logging.level.success": "bold green"
        })
        self._console = Console(theme=custom_theme)
        self._logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger(LOGGER_NAME)
        if logger.hasHandlers():
            return logger

        logger.setLevel(logging.INFO)
        handler = RichHandler(
            console=self._console,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            keywords=["INFO", "SUCCESS", "WARNING", "ERROR", "DEBUG", "CRITICAL"],
            show_path=False
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        return logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def set_level(self, level: str):
        self._logger.setLevel(level.upper())

    def debug(self, message: str):
        self._logger.debug(message)

    def info(self, message: str):
        self._logger.info(message)

    def success(self, message: str):
        self._logger.success(message)

    def warning(self, message: str):
        self._logger.warning(message)

    def error(self, message: str):
        self._logger.error(message)

    def exception(self, message: str):
        self._logger.exception(message)

    def rule(self, title: str, style: str = "cyan"):
        self._console.rule(f"[bold {style}]{title}[/bold {style}]", style=style)

    def display_data_as_table(self, data: Dict[str, Any], title: str):
        table = Table(show_header=True, header_style="bold magenta", box=None, show_edge=False)
        table.add_column("Parameter", style="cyan", no_wrap=True, width=20)
        table.add_column("Value", style="white")

        for key, value in data.items():
            if isinstance(value, dict):
                for sub_key, sub_value in value.items():
                    table.add_row(f"  • {key}.{sub_key}", str(sub_value))
            elif isinstance(value, list):
                table.add_row(key, ", ".join(map(str, value or [])))
            else:
                table.add_row(key, str(value))

        panel = Panel(table, title=f"[bold green]✓ {title}[/bold green]", border_style="green")
        self._console.print(panel)

    def display_event_trace(self, events: Iterable["NetworkEvent"], title: str = "Network Events"):
        """Renders a network event trace as a compact table."""
        table = Table(show_header=True, header_style="bold magenta", box=None, show_edge=False)
        table.add_column("#", style="dim", width=4)
        table.add_column("Event", style="cyan", no_wrap=True)
        table.add_column("Timestamp", style="white")
        table.add_column("Payload", style="white", overflow="ellipsis", max_width=60)

        for index, event in enumerate(events, start=1):
            payload = "" if event.payload is None else str(event.payload)
            table.add_row(str(index), event.type, event.timestamp, payload)

        self._console.print(Panel(table, title=f"[bold blue]{title}[/bold blue]", border_style="blue"))

    def display_error_panel(self, title: str, error_message: str):
        panel = Panel(error_message, title=f"[bold red]{title}[/bold red]", border_style="red")
        self._console.print(panel)


# Singleton instance for global use
console = ConsoleManager()
