"""Provider de valeurs depuis le keyring système.

Ce module fournit KeyringValueProvider qui lit des secrets de
publication (token Central Portal, passphrase GPG...) via le module
keyring, sous un nom de service applicatif.

Compatibilités :
- KWallet (KDE Plasma 6)
- KeePassXC (avec "Enable Secret Service" active)
- GNOME Keyring
- macOS Keychain, Windows Credential Locker
"""

from typing import Any, Optional

from maven_publish_utils.credentials.base import ValueProvider
from maven_publish_utils.errors.exceptions import CredentialError
from maven_publish_utils.logging.base import Logger


class KeyringUnavailableError(CredentialError):
    """Levée quand le module keyring n'est pas installé."""


class KeyringValueProvider(ValueProvider):
    """Lit des valeurs via le keyring système, en lecture seule.

    La clé de l'environnement (ex: "CENTRAL_PORTAL_PASSWORD") sert
    d'identifiant dans le keyring sous le service configuré.

    Attributes:
        _service: Nom du service keyring (ex: "maven-central").
        _logger: Logger optionnel.
        _backend: Backend keyring injecté (pour tests unitaires).
    """

    def __init__(
        self,
        service: str,
        logger: Optional[Logger] = None,
        keyring_backend: Optional[Any] = None,
    ) -> None:
        """Initialise le provider keyring.

        Args:
            service: Nom du service sous lequel les secrets sont ranges.
            logger: Logger optionnel (injection de dépendance).
            keyring_backend: Backend keyring optionnel. Permet
                d'injecter un mock pour les tests sans keyring
                système réel.
        """
        self._service = service
        self._logger = logger
        self._backend = keyring_backend

    @property
    def service(self) -> str:
        """Nom du service keyring."""
        return self._service

    def _get_keyring(self) -> Any:
        """Retourne le module keyring ou le backend injecté.

        Returns:
            Module keyring ou backend de test.

        Raises:
            KeyringUnavailableError: si keyring absent
                et aucun backend injecté.
        """
        if self._backend is not None:
            return self._backend
        try:
            import keyring
            return keyring
        except ImportError:
            raise KeyringUnavailableError(
                "Le module 'keyring' n'est pas installé. "
                "Installez-le avec : pip install keyring"
            )

    def get(self, key: str) -> Optional[str]:
        """Lit une valeur depuis le keyring système.

        Une erreur du backend (trousseau verrouillé, D-Bus absent...)
        est journalisée et traitée comme une absence.

        Args:
            key: Nom de la variable.

        Returns:
            Valeur non vide ou None.
        """
        if not self.is_available():
            return None
        kr = self._get_keyring()
        try:
            value = kr.get_password(self._service, key)
        except Exception as exc:
            if self._logger:
                self._logger.log_warning(
                    f"Lecture keyring impossible : "
                    f"service={self._service!r}, key={key!r} ({exc})"
                )
            return None
        return value if value else None

    def is_available(self) -> bool:
        """Indique si le keyring est opérationnel.

        Returns:
            True si le module keyring est installé ou si un
            backend a été injecté.
        """
        if self._backend is not None:
            return True
        try:
            import keyring  # noqa: F401
            return True
        except ImportError:
            return False

    @property
    def source_name(self) -> str:
        """Nom court de la source.

        Returns:
            "keyring"
        """
        return "keyring"
