"""Interface abstraite des sources de valeurs.

Un ValueProvider est un environnement clé -> valeur en lecture
seule. Il peut être passé directement à resolve() et validate().
"""

from abc import ABC, abstractmethod
from typing import Optional


class ValueProvider(ABC):
    """Interface de lecture d'une valeur depuis une source."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Retourne la valeur ou None si absente ou vide.

        Args:
            key: Nom de la variable (ex: "OSSRH_USERNAME").

        Returns:
            Valeur non vide ou None.
        """
        pass  # pragma: no cover

    @abstractmethod
    def is_available(self) -> bool:
        """Indique si ce provider est opérationnel.

        Returns:
            True si le provider peut être utilisé.
        """
        pass  # pragma: no cover

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Nom court de la source.

        Returns:
            Nom de la source (ex: "env", "dotenv", "keyring").
        """
        pass  # pragma: no cover
