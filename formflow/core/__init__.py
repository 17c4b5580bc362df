"""Core configuration and factory components.

Nothing here configures logging on import. Applications call
``setup_logging()`` from ``formflow.core.logging_config`` once at startup.
"""

from formflow.core.config import Settings, get_settings
from formflow.core.factory import ComponentFactory

__all__ = [
    "Settings",
    "get_settings",
    "ComponentFactory",
]
