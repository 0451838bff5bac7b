"""Provider de valeurs depuis un fichier .env.

Ce module fournit DotEnvValueProvider qui lit un fichier .env via
python-dotenv (dotenv_values) sans jamais modifier os.environ.
"""

from pathlib import Path
from typing import Dict, Optional, Union

from maven_publish_utils.credentials.base import ValueProvider
from maven_publish_utils.logging.base import Logger


class DotEnvValueProvider(ValueProvider):
    """Lit les valeurs d'un fichier .env.

    Le fichier est lu une seule fois, au premier accès ; les valeurs
    sont ensuite servies depuis cet instantané. Si python-dotenv n'est
    pas installé ou si le fichier est absent, is_available() retourne
    False et get() retourne toujours None.

    Attributes:
        _dotenv_path: Chemin vers le fichier .env.
        _logger: Logger optionnel.
        _values: Valeurs lues, None tant que le fichier n'est pas chargé.
    """

    def __init__(
        self,
        dotenv_path: Union[str, Path],
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialise le provider de fichier .env.

        Args:
            dotenv_path: Chemin vers le fichier .env.
            logger: Logger optionnel (injection de dépendance).
        """
        self._dotenv_path = Path(dotenv_path)
        self._logger = logger
        self._values: Optional[Dict[str, str]] = None

    @property
    def dotenv_path(self) -> Path:
        """Chemin du fichier .env."""
        return self._dotenv_path

    def load(self) -> bool:
        """Lit le fichier .env dans un instantané interne.

        Returns:
            True si le fichier a été lu avec succès.
        """
        try:
            from dotenv import dotenv_values
        except ImportError:
            return False
        if not self._dotenv_path.exists():
            if self._logger:
                self._logger.log_warning(
                    f"Fichier .env introuvable : "
                    f"{self._dotenv_path}"
                )
            return False
        raw = dotenv_values(dotenv_path=self._dotenv_path)
        # Une clé sans valeur ("KEY" seul) est lue comme None
        self._values = {
            k: v for k, v in raw.items() if v is not None
        }
        if self._logger:
            self._logger.log_info(
                f"Fichier .env chargé : {self._dotenv_path} "
                f"({len(self._values)} variable(s))"
            )
        return True

    def get(self, key: str) -> Optional[str]:
        """Charge le .env si nécessaire puis lit la variable.

        Args:
            key: Nom de la variable.

        Returns:
            Valeur non vide ou None.
        """
        if self._values is None and not self.load():
            return None
        value = (self._values or {}).get(key)
        return value if value else None

    def is_available(self) -> bool:
        """Indique si ce provider est opérationnel.

        Returns:
            True si python-dotenv est installé et le fichier existe.
        """
        try:
            import dotenv  # noqa: F401
        except ImportError:
            return False
        return self._dotenv_path.exists()

    @property
    def source_name(self) -> str:
        """Nom court de la source.

        Returns:
            "dotenv"
        """
        return "dotenv"
