"""Package logger for typegraphql, rendered through Rich."""

import logging

from rich.console import Console
from rich.logging import RichHandler


class TypeGraphLogger(logging.Logger):
    """
    Logger used by the type-graph compiler.

    Messages are rendered with a RichHandler bound to its own console, so
    compilation diagnostics and tracebacks stay readable in a terminal.
    """

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        """
        Initialize the logger.

        Args:
            name: Logger name
            level: Initial log level
        """
        super().__init__(name, level)
        self.console = Console(stderr=True)

        handler = RichHandler(
            console=self.console,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        self.addHandler(handler)


def get_logger(name: str = "typegraphql") -> TypeGraphLogger:
    """
    Get or create a TypeGraphLogger instance.

    The logger class is only swapped while this logger is created, so other
    loggers in the host application keep the default class.

    Args:
        name: Logger name (default: "typegraphql")

    Returns:
        TypeGraphLogger instance
    """
    previous = logging.getLoggerClass()
    logging.setLoggerClass(TypeGraphLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous)

    return logger  # type: ignore[return-value]
