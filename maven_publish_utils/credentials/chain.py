"""Chaîne de priorité de providers de valeurs.

Ce module implémente le pattern Chain of Responsibility pour
parcourir une liste ordonnée de providers jusqu'à trouver une
valeur non vide.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

from maven_publish_utils.credentials.base import ValueProvider
from maven_publish_utils.credentials.providers.dotenv import (
    DotEnvValueProvider,
)
from maven_publish_utils.credentials.providers.env import (
    EnvValueProvider,
)
from maven_publish_utils.credentials.providers.keyring import (
    KeyringValueProvider,
)
from maven_publish_utils.logging.base import Logger


class ProviderChain(ValueProvider):
    """Parcourt une liste ordonnée de providers jusqu'au premier succès.

    Exemple de chaîne pour un poste de développement :

        chain = ProviderChain([
            EnvValueProvider(),
            DotEnvValueProvider(".env"),
            KeyringValueProvider("maven-central"),
        ])
        token = chain.get("CENTRAL_PORTAL_PASSWORD")

    Attributes:
        _providers: Liste ordonnée de providers (priorité décroissante).
        _logger: Logger optionnel. Seuls les noms de clés et de
            sources sont journalises, jamais les valeurs.
    """

    def __init__(
        self,
        providers: List[ValueProvider],
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialise la chaîne de providers.

        Args:
            providers: Liste ordonnée de providers.
            logger: Logger optionnel (injection de dépendance).
        """
        self._providers = list(providers)
        self._logger = logger

    @property
    def providers(self) -> Tuple[ValueProvider, ...]:
        """Providers de la chaîne, dans l'ordre de priorité."""
        return tuple(self._providers)

    def _lookup(
        self, key: str
    ) -> Tuple[Optional[str], Optional[str]]:
        """Retourne (valeur, source) du premier provider qui répond.

        Les providers indisponibles sont ignorés silencieusement.
        """
        for provider in self._providers:
            if not provider.is_available():
                continue
            value = provider.get(key)
            if value:
                if self._logger:
                    self._logger.log_info(
                        f"Variable {key!r} trouvée via "
                        f"{provider.source_name!r}"
                    )
                return value, provider.source_name
        if self._logger:
            self._logger.log_info(
                f"Variable {key!r} absente de toute la chaîne"
            )
        return None, None

    def get(self, key: str) -> Optional[str]:
        """Retourne la première valeur non vide trouvée dans la chaîne.

        Args:
            key: Nom de la variable.

        Returns:
            Valeur ou None si absente de tous les providers.
        """
        value, _ = self._lookup(key)
        return value

    def source_of(self, key: str) -> Optional[str]:
        """Retourne le nom du provider qui fournit la variable.

        Args:
            key: Nom de la variable.

        Returns:
            source_name du provider, ou None si absente.
        """
        _, source = self._lookup(key)
        return source

    def is_available(self) -> bool:
        """Indique si au moins un provider est disponible."""
        return any(
            p.is_available() for p in self._providers
        )

    @property
    def source_name(self) -> str:
        """Nom court de la source.

        Returns:
            "chain"
        """
        return "chain"

    @classmethod
    def default(
        cls,
        dotenv_path: Optional[Union[str, Path]] = None,
        keyring_service: Optional[str] = None,
        logger: Optional[Logger] = None,
    ) -> "ProviderChain":
        """Crée la chaîne standard env -> dotenv -> keyring.

        Args:
            dotenv_path: Chemin optionnel vers un fichier .env.
                Si None, le provider dotenv est omis de la chaîne.
            keyring_service: Service keyring optionnel. Si None,
                le provider keyring est omis de la chaîne.
            logger: Logger optionnel partage entre les providers.

        Returns:
            Instance de ProviderChain avec les providers
            standards dans l'ordre de priorité.
        """
        providers: List[ValueProvider] = [EnvValueProvider()]
        if dotenv_path is not None:
            providers.append(
                DotEnvValueProvider(
                    dotenv_path=dotenv_path,
                    logger=logger,
                )
            )
        if keyring_service is not None:
            providers.append(
                KeyringValueProvider(
                    service=keyring_service,
                    logger=logger,
                )
            )
        return cls(providers=providers, logger=logger)
