"""
    LoggerErrorHandler
"""
from maven_publish_utils.errors.base import ErrorHandler
from maven_publish_utils.errors.exceptions import (ApplicationError,
                                                   IncompleteCredentialsError)
from maven_publish_utils.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour logger les erreurs.

    Enregistre les erreurs via le Logger injecté au constructeur.
    Une configuration incomplète est un avertissement, pas une erreur.
    """

    def __init__(self, logger: Logger) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
        """
        self.logger = logger

    def handle(self, error: Exception) -> None:
        """Log l'erreur avec différents niveaux selon la gravité.

        Args:
            error: L'exception à logger.
        """
        if isinstance(error, IncompleteCredentialsError):
            self.logger.log_warning(f"{type(error).__name__}: {str(error)}")
        elif isinstance(error, ApplicationError):
            self.logger.log_error(f"{type(error).__name__}: {str(error)}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )
