"""
    ConsoleErrorHandler (générique, configurable)
"""
import sys
from typing import TextIO

from maven_publish_utils.errors.base import ErrorHandler
from maven_publish_utils.errors.exceptions import (ApplicationError,
                                                   ConfigurationError,
                                                   FileConfigurationError,
                                                   IncompleteCredentialsError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche un message de solution adapté au type
    d'erreur. Les solutions passées à l'instanciation sont prioritaires
    sur les messages par défaut.
    """

    def __init__(
        self,
        solutions: dict[type[Exception], str] | None = None,
        stream: TextIO | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            solutions: Dictionnaire {TypeException: "message solution"}.
            stream: Flux de sortie (défaut: sys.stderr au moment
                de l'affichage).
        """
        self.solutions = solutions or {}
        self._stream = stream

    def _print(self, message: str) -> None:
        print(message, file=self._stream or sys.stderr)

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console avec des messages utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, ApplicationError):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: ApplicationError) -> str:
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution
        if isinstance(error, IncompleteCredentialsError):
            missing = ", ".join(error.missing) or "?"
            return (
                f"Définissez les champs manquants ({missing}) "
                "via l'environnement, un fichier .env ou le keyring."
            )
        if isinstance(error, FileConfigurationError):
            return "Vérifiez le chemin et la syntaxe du fichier."
        if isinstance(error, ConfigurationError):
            return "Vérifiez votre fichier de configuration."
        return "Voir les suggestions ci-dessus."

    def _handle_known_error(self, error: ApplicationError) -> None:
        """Gère les erreurs connues du projet.

        Args:
            error: L'exception métier à traiter.
        """
        self._print(f"\n🛑 {type(error).__name__}: {str(error)}")
        self._print(f"\n🔧 Solution : {self._solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues.

        Args:
            error: L'exception non prévue à afficher.
        """
        self._print(f"\n💥 Erreur inattendue: {str(error)}")
        self._print(f"Type: {type(error).__name__}")
        self._print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue avec ces informations."
        )
