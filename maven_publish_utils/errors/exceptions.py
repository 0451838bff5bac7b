"""
Module contenant les exceptions personnalisées pour maven_publish_utils.

Ce module suit le principe SRP en isolant la gestion des exceptions.
"""


class ApplicationError(Exception):
    """Exception de base pour toutes les applications."""
    pass

class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les Configurations."""
    pass

class FileConfigurationError(ConfigurationError):
    """ Exception de base pour toutes les fichiers de configurations    """
    pass

class CredentialError(ApplicationError):
    """Exception de base pour toutes les erreurs credentials."""
    pass

class IncompleteCredentialsError(CredentialError):
    """Levée quand l'appelant exige une configuration complète.

    Attributes:
        missing: Noms des champs requis absents.
    """

    def __init__(self, message: str, missing: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.missing = missing
