"""Event-style logger used across the package."""

from __future__ import annotations

import logging

from ..constants import debug_enabled
from . import event_catalog

EVENT_NAME_WIDTH = 32


class CodecLogger:
    """Thin wrapper emitting ``domain_action`` events on a stdlib logger.

    The package never installs output handlers itself; applications call
    ``simple_irc.logging_config.LoggerConfigurator().configure()`` or wire
    up logging however they like.
    """

    def __init__(self, name: str = "simple_irc") -> None:
        self.logger = logging.getLogger(name)
        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        # Parse failures are logged on a hot path; skip formatting when unused.
        if not self.logger.isEnabledFor(level):
            return
        event_name = f"{domain}_{action}".lower()
        if human is None:
            human = self._render(domain, action, kwargs)
        if debug_enabled():
            msg = self._build_debug_message(event_name, human, kwargs)
        else:
            msg = human
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _render(domain: str, action: str, kwargs: dict[str, object]) -> str:
        template = event_catalog.template_for(domain, action)
        if template is None:
            return f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            return template

    @staticmethod
    def _build_debug_message(
        event_name: str, human: str, kwargs: dict[str, object]
    ) -> str:
        if len(event_name) <= EVENT_NAME_WIDTH:
            ev = event_name.ljust(EVENT_NAME_WIDTH)
        else:
            ev = event_name[: EVENT_NAME_WIDTH - 1] + "…"
        context = ", ".join(f"{k}={v!r}" for k, v in kwargs.items())
        base = f"{ev} {human}"
        if context:
            base = f"{base} ({context})"
        return base


logger = CodecLogger()
