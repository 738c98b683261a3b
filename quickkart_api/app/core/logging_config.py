"""
Logging configuration for the store layout API.

``setup_logging`` attaches one formatter to the root logger and then
tunes the third-party loggers this service runs alongside: uvicorn's
server and access loggers follow ``LOG_LEVEL``, while the chatty
``pymongo`` driver loggers are held at WARNING unless the service
itself runs at DEBUG.  GraphQL resolver failures are reported by
strawberry on ``strawberry.execution``, which is kept at ERROR.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that follow the service's own level.
FOLLOW_SERVICE_LEVEL = ("uvicorn", "uvicorn.error", "uvicorn.access", "quickkart_api")

# Loggers pinned to a minimum level; command monitoring and topology
# events would otherwise log every query at DEBUG.
PINNED_LEVELS: Dict[str, int] = {
    "pymongo": logging.WARNING,
    "pymongo.command": logging.WARNING,
    "pymongo.topology": logging.WARNING,
    "pymongo.connection": logging.WARNING,
    "strawberry.execution": logging.ERROR,
}


def resolve_level(level: str) -> int:
    """Translate a level name such as ``"debug"`` into its number (INFO if unknown)."""
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and the service's third-party loggers.

    Handlers are attached only when the root logger has none, so repeated
    ``create_app()`` calls (tests) do not duplicate output.  Logger levels
    are applied every time.

    Parameters
    ----------
    level : str
        Value of ``LOG_LEVEL``.  Case insensitive.
    logfile : Optional[str]
        Value of ``LOG_FILE``; adds a UTF-8 file handler when set.
    """
    numeric_level = resolve_level(level)
    root = logging.getLogger()
    root.setLevel(numeric_level)

    if not root.handlers:
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

        if logfile:
            file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    for name in FOLLOW_SERVICE_LEVEL:
        logging.getLogger(name).setLevel(numeric_level)

    for name, minimum in PINNED_LEVELS.items():
        # Debugging the service also surfaces driver traffic.
        target = numeric_level if numeric_level <= logging.DEBUG and name.startswith("pymongo") else minimum
        logging.getLogger(name).setLevel(max(target, numeric_level))
