"""Providers de valeurs pour le module credentials."""

from maven_publish_utils.credentials.providers.env import (
    EnvValueProvider,
    MappingValueProvider,
)
from maven_publish_utils.credentials.providers.dotenv import (
    DotEnvValueProvider,
)
from maven_publish_utils.credentials.providers.keyring import (
    KeyringUnavailableError,
    KeyringValueProvider,
)

__all__ = [
    "EnvValueProvider",
    "MappingValueProvider",
    "DotEnvValueProvider",
    "KeyringUnavailableError",
    "KeyringValueProvider",
]
