"""Event template catalog loaded from the co-located JSON file.

The file maps ``domain -> action -> template``; templates are ``str.format``
strings filled from the keyword context passed to ``log_event``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

TEMPLATES_PATH = Path(__file__).with_name("event_templates.json")

EVENT_TEMPLATES: dict[tuple[str, str], str] = {}


def load_event_templates(path: Path = TEMPLATES_PATH) -> dict[tuple[str, str], str]:
    """Read ``path`` and flatten it into ``{(domain, action): template}``.

    Non-string entries are skipped. A missing or unreadable file yields a
    single ``("catalog", "load_error")`` entry describing the problem.
    """
    templates: dict[tuple[str, str], str] = {}
    try:
        with path.open("r", encoding="utf-8") as f:
            raw: Any = json.load(f)
    except FileNotFoundError:
        templates[("catalog", "load_error")] = f"Event templates file missing: {path.name}"
        return templates
    except (OSError, ValueError) as e:
        templates[("catalog", "load_error")] = f"Failed to load event templates: {e}"[:200]
        return templates

    if not isinstance(raw, Mapping):
        return templates
    for domain, actions in raw.items():
        if not isinstance(domain, str) or not isinstance(actions, Mapping):
            continue
        for action, template in actions.items():
            if isinstance(action, str) and isinstance(template, str):
                templates[(domain, action)] = template
    return templates


def reload_event_templates(path: Path = TEMPLATES_PATH) -> None:
    global EVENT_TEMPLATES  # noqa: PLW0603
    EVENT_TEMPLATES = load_event_templates(path)


def template_for(domain: str, action: str) -> str | None:
    return EVENT_TEMPLATES.get((domain, action))


reload_event_templates()

__all__ = [
    "EVENT_TEMPLATES",
    "TEMPLATES_PATH",
    "load_event_templates",
    "reload_event_templates",
    "template_for",
]
