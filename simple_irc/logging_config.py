r"""
Logging configuration for applications embedding simple_irc.

The library itself only attaches a NullHandler. Hosts (and the benchmark
script) call ``LoggerConfigurator().configure()`` to get colored console
output through colorlog.
"""

import logging
import sys

import colorlog

from .constants import debug_enabled

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "magenta",
}


def build_formatter(use_time: bool = True) -> colorlog.ColoredFormatter:
    """Return the project's colored formatter."""
    fmt = "%(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s"
    if use_time:
        fmt = "%(asctime)s " + fmt
    return colorlog.ColoredFormatter(
        fmt,
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors=LOG_COLORS,
        secondary_log_colors={
            "message": {
                "ERROR": "red",
                "CRITICAL": "magenta",
            }
        },
        reset=True,
    )


class LoggerConfigurator:
    """Configures colored console logging.

    Uses environment variables:
    - DEBUG: Set to 'true', '1', or 'yes' for DEBUG level, otherwise INFO
    """

    def __init__(self, config=None):
        """Initialize the configurator.

        Args:
            config: Optional dict; supports ``level`` (int) and ``stream``.
        """
        self.config = config or {}

    def configure(self):
        log_level = self.config.get("level")
        if log_level is None:
            log_level = logging.DEBUG if debug_enabled() else logging.INFO

        handler = logging.StreamHandler(self.config.get("stream", sys.stderr))
        handler.setFormatter(build_formatter())

        root_logger = logging.getLogger()
        # Replace previously installed handlers so repeated calls don't duplicate output
        for existing in list(root_logger.handlers):
            root_logger.removeHandler(existing)
        root_logger.addHandler(handler)
        root_logger.setLevel(log_level)
        logging.getLogger("simple_irc").setLevel(log_level)
        return handler
