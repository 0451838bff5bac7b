"""Module de configuration."""

from maven_publish_utils.config.loader import (
    ConfigLoader,
    FileConfigLoader,
)
from maven_publish_utils.config.schema import (
    CheckModel,
    LoggingModel,
    NexusModel,
    PublishingConfigModel,
    SourceModel,
    load_publishing_config,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "PublishingConfigModel",
    "SourceModel",
    "CheckModel",
    "NexusModel",
    "LoggingModel",
    "load_publishing_config",
]
