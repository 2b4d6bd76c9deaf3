import logging
import os
import sys

ENV_LOG_LEVEL = "STORYSAVE_LOG_LEVEL"

_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
_DEBUG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s:%(lineno)d: %(message)s"


def resolve_level(default_level: int = logging.INFO) -> int:
    """Return the level named by STORYSAVE_LOG_LEVEL, or ``default_level``."""
    level_name = os.getenv(ENV_LOG_LEVEL)
    if not level_name:
        return default_level
    level = getattr(logging, level_name.upper(), None)
    return level if isinstance(level, int) else default_level


def configure_logging(default_level: int = logging.INFO, debug: bool = False) -> None:
    """Configure the root logger on stderr.

    Log lines go to stderr so the CLI's stdout (e.g. ``info`` listings) stays
    clean. ``debug`` forces DEBUG and adds timestamps and line numbers.
    """
    level = logging.DEBUG if debug else resolve_level(default_level)
    logging.basicConfig(
        level=level,
        format=_DEBUG_FORMAT if debug else _FORMAT,
        stream=sys.stderr,
    )
