"""Project logging package.

Contains the event template catalog and the CodecLogger wrapper.
"""

from .event_catalog import EVENT_TEMPLATES, reload_event_templates  # noqa: F401
from .logger import CodecLogger, logger  # noqa: F401

__all__ = ["CodecLogger", "logger", "EVENT_TEMPLATES", "reload_event_templates"]
