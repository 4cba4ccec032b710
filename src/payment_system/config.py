"""Application configuration.

Configuration is a plain immutable value built by the caller and passed to
whatever needs it; nothing is read from the environment or from files.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ENVIRONMENT = "DEV"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Deployment settings.

    Attributes:
        environment: Label of the deployment environment.
    """

    environment: str = DEFAULT_ENVIRONMENT


def load_config() -> AppConfig:
    """Return the application configuration.

    Every call returns an equal value; there is no way to change it.
    """
    return AppConfig()
