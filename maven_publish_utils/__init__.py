"""
Maven Publish Utils - Vérification des credentials de publication Maven Central.

Modules disponibles:
- credentials: Sources de credentials, résolution par priorité,
  rapport de validation (resolve, validate, CredentialResolver)
- publishing: Profils Central Portal / OSSRH et paramètres Nexus
- config: Chargement de configuration (TOML, JSON, schéma Pydantic)
- reporting: Rapports console et JSON
- logging: Gestion des logs (Logger, FileLogger, ConsoleLogger)
- errors: Exceptions et handlers d'erreurs
"""

__version__ = "1.0.0"

from maven_publish_utils.logging import Logger, FileLogger, ConsoleLogger
from maven_publish_utils.errors import (
    ApplicationError,
    ConfigurationError,
    CredentialError,
    IncompleteCredentialsError,
    ErrorHandlerChain,
)
from maven_publish_utils.config import (
    ConfigLoader,
    FileConfigLoader,
    PublishingConfigModel,
    load_publishing_config,
)
from maven_publish_utils.credentials import (
    # Modèles
    CredentialSource,
    CredentialSet,
    FieldSpec,
    FieldStatus,
    ValidationReport,
    # Providers
    ValueProvider,
    EnvValueProvider,
    MappingValueProvider,
    DotEnvValueProvider,
    KeyringValueProvider,
    ProviderChain,
    # Résolution
    resolve,
    validate,
    key_present,
    any_key_present,
    credential_part_present,
    CredentialResolver,
    PublishingStatus,
)
from maven_publish_utils.publishing import (
    NexusSettings,
    PublishingProfile,
    VariableCheck,
    get_profile,
    list_profiles,
    profile_from_config,
)
from maven_publish_utils.reporting import (
    StatusReporter,
    ConsoleStatusReporter,
    JsonStatusReporter,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    "ConsoleLogger",
    # Errors
    "ApplicationError",
    "ConfigurationError",
    "CredentialError",
    "IncompleteCredentialsError",
    "ErrorHandlerChain",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "PublishingConfigModel",
    "load_publishing_config",
    # Credentials - Modèles
    "CredentialSource",
    "CredentialSet",
    "FieldSpec",
    "FieldStatus",
    "ValidationReport",
    # Credentials - Providers
    "ValueProvider",
    "EnvValueProvider",
    "MappingValueProvider",
    "DotEnvValueProvider",
    "KeyringValueProvider",
    "ProviderChain",
    # Credentials - Résolution
    "resolve",
    "validate",
    "key_present",
    "any_key_present",
    "credential_part_present",
    "CredentialResolver",
    "PublishingStatus",
    # Publishing
    "NexusSettings",
    "PublishingProfile",
    "VariableCheck",
    "get_profile",
    "list_profiles",
    "profile_from_config",
    # Reporting
    "StatusReporter",
    "ConsoleStatusReporter",
    "JsonStatusReporter",
]
