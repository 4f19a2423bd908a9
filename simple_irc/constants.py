"""
Configuration constants for simple_irc

Each constant can be overridden by setting an environment variable with the same name.
"""

import os
import sys


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, warns on stderr and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"simple_irc: ignoring invalid integer {name}={value!r}, using default {default}",
                file=sys.stderr,
            )
    return default


def _get_env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("true", "1", "yes")


# Maximum number of characters of an unparsable line echoed into log events
PARSE_LOG_TRUNCATE_CHARS = _get_env_int("PARSE_LOG_TRUNCATE_CHARS", 120)

# Iterations per case for scripts/parse_bench.py
BENCH_ITERATIONS = _get_env_int("BENCH_ITERATIONS", 100_000)


def debug_enabled() -> bool:
    """Return True when the DEBUG environment variable is set to a true value.

    Read on every call so tests and long-running hosts can toggle it.
    """
    return _get_env_bool("DEBUG", False)
