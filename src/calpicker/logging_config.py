"""Logging configuration for calpicker.

The engine modules only log at DEBUG (grid builds, range clicks) and WARNING
(selection ignored for the active mode), so nothing reaches stderr at the
default INFO level unless something is off. `calpicker -v` shows the DEBUG trail.
"""

import logging
import sys

_configured = False

ROOT_LOGGER = "calpicker"


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for the calpicker package.

    - Output to stderr (keeps typer.echo stdout clean)
    - Format: HH:MM:SS LEVEL [module.name] message
    - Idempotent: safe to call multiple times
    """
    global _configured
    if _configured:
        return
    _configured = True

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-5s [%(name)s] %(message)s", datefmt="%H:%M:%S")
    )

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level)
    root.addHandler(handler)


def reset_logging() -> None:
    """Reset logging state. For testing only."""
    global _configured
    _configured = False
    root = logging.getLogger(ROOT_LOGGER)
    root.handlers.clear()
    root.setLevel(logging.WARNING)
