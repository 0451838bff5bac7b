"""Module de gestion des errors."""

from maven_publish_utils.errors.base import (DEFAULT_EXIT_CODES,
                                             ErrorHandler,
                                             ErrorHandlerChain)
from maven_publish_utils.errors.exceptions import (ApplicationError,
                                                   ConfigurationError,
                                                   FileConfigurationError,
                                                   CredentialError,
                                                   IncompleteCredentialsError)
from maven_publish_utils.errors.console_handler import ConsoleErrorHandler
from maven_publish_utils.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "CredentialError",
    "IncompleteCredentialsError",
    "DEFAULT_EXIT_CODES",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
