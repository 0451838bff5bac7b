"""Providers de valeurs en mémoire : environnement du processus et mapping.

EnvValueProvider fige une copie de os.environ à la construction :
la résolution travaille sur un instantané, jamais sur l'état global.
"""

import os
from typing import Mapping, Optional

from maven_publish_utils.credentials.base import ValueProvider


class MappingValueProvider(ValueProvider):
    """Expose un mapping clé -> valeur comme ValueProvider.

    Attributes:
        _values: Copie du mapping fourni.
        _name: Libellé de la source.
    """

    def __init__(
        self,
        values: Mapping[str, str],
        name: str = "mapping",
    ) -> None:
        """Initialise le provider.

        Args:
            values: Valeurs à exposer (copiées).
            name: Libellé retourne par source_name.
        """
        self._values = dict(values)
        self._name = name

    def get(self, key: str) -> Optional[str]:
        """Retourne la valeur ou None si absente ou vide."""
        value = self._values.get(key)
        return value if value else None

    def is_available(self) -> bool:
        """Toujours True."""
        return True

    @property
    def source_name(self) -> str:
        """Libellé fourni à la construction."""
        return self._name


class EnvValueProvider(MappingValueProvider):
    """Instantané de os.environ pris à la construction.

    Les modifications ultérieures de l'environnement du processus
    ne sont pas visibles ; créer un nouveau provider pour les voir.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Initialise le provider d'environnement.

        Args:
            environ: Environnement à copier (défaut: os.environ).
        """
        super().__init__(
            os.environ if environ is None else environ,
            name="env",
        )
