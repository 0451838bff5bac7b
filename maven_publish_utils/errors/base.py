"""Interfaces abstraites pour la gestion des erreurs de publication."""

import sys
from abc import ABC, abstractmethod
from typing import Optional

from maven_publish_utils.errors.exceptions import (
    ConfigurationError,
    CredentialError,
)

# Codes de sortie par famille d'erreur (le premier isinstance gagne)
DEFAULT_EXIT_CODES: dict[type[Exception], int] = {
    ConfigurationError: 2,
    CredentialError: 1,
}


class ErrorHandler(ABC):
    """Interface de base pour les handlers d'erreurs.

    Chaque implémentation concrète définit une stratégie
    de traitement des erreurs (affichage console, logging, etc.).
    """

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Traite une erreur.

        Args:
            error: L'exception à traiter.
        """
        pass


class ErrorHandlerChain:
    """Diffuse les erreurs à tous les handlers enregistrés.

    Chaque erreur est transmise à tous les handlers dans l'ordre
    d'ajout (ex: console puis logger), puis le code de sortie est
    choisi selon le type de l'erreur.
    """

    def __init__(
        self,
        exit_codes: Optional[dict[type[Exception], int]] = None,
    ) -> None:
        """Initialise la chaîne avec une liste vide de handlers.

        Args:
            exit_codes: Correspondance {TypeException: code de sortie}.
                Défaut: DEFAULT_EXIT_CODES.
        """
        self.handlers: list[ErrorHandler] = []
        self.exit_codes = (
            exit_codes if exit_codes is not None
            else dict(DEFAULT_EXIT_CODES)
        )

    def add_handler(self, handler: ErrorHandler) -> None:
        """Ajoute un handler à la chaîne.

        Args:
            handler: Le handler d'erreurs à ajouter.
        """
        self.handlers.append(handler)

    def handle(self, error: Exception) -> None:
        """Fait passer l'erreur à travers tous les handlers.

        Args:
            error: L'exception à diffuser.
        """
        for handler in self.handlers:
            handler.handle(error)

    def exit_code_for(self, error: Exception) -> int:
        """Retourne le code de sortie associé à une erreur.

        Args:
            error: L'exception traitée.

        Returns:
            Code configuré pour le type d'erreur, 1 sinon.
        """
        for error_type, code in self.exit_codes.items():
            if isinstance(error, error_type):
                return code
        return 1

    def handle_and_exit(
        self,
        error: Exception,
        exit_code: Optional[int] = None,
    ) -> None:
        """Gère l'erreur et terminé le programme.

        Args:
            error: L'exception à traiter avant la sortie.
            exit_code: Code de sortie forcé. Si None, utilise
                exit_code_for(error).
        """
        self.handle(error)
        if exit_code is None:
            exit_code = self.exit_code_for(error)
        sys.exit(exit_code)
