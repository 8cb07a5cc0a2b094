"""Configuration module for playsort.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

resilient_operation(operation_name: str)
    Decorator for logging errors at I/O boundaries

Usage:
------
```python
from playsort.config import settings
playlist_dir = settings.playlist.playlist_dir

from playsort.config import get_logger
logger = get_logger(__name__)
logger.info("Starting operation")
```
"""

from .logging import (
    get_logger,
    resilient_operation,
    setup_loguru_logger,
)
from .settings import Settings, settings

__all__ = [
    "Settings",
    "get_logger",
    "resilient_operation",
    "settings",
    "setup_loguru_logger",
]
