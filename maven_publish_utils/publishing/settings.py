"""Paramètres transmis au plugin de publication Nexus.

Ces valeurs (URLs, timeouts, réessais de transition du staging
repository) sont opaques pour ce paquet : elles sont validées,
exposées dans les rapports et transmises telles quelles.
"""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict

CENTRAL_PORTAL_URL = "https://central.sonatype.com/api/v1/publisher/"
CENTRAL_PORTAL_GUIDE = (
    "https://central.sonatype.org/publish/generate-portal-token/"
)
OSSRH_URL = "https://s01.oss.sonatype.org/service/local/"
OSSRH_SNAPSHOT_URL = (
    "https://s01.oss.sonatype.org/content/repositories/snapshots/"
)
OSSRH_GUIDE = "https://central.sonatype.org/publish/publish-guide/"


@dataclass(frozen=True)
class NexusSettings:
    """Configuration du dépôt Nexus cible.

    Attributes:
        nexus_url: URL de l'API de publication.
        snapshot_repository_url: URL du dépôt de snapshots.
        connect_timeout: Timeout de connexion en secondes.
        client_timeout: Timeout client en secondes.
        transition_max_retries: Nombre max de vérifications de
            transition du staging repository.
        transition_delay: Délai entre deux vérifications, en secondes.
        setup_guide: Documentation affichée quand il manque
            des credentials.
    """

    nexus_url: str = CENTRAL_PORTAL_URL
    snapshot_repository_url: str = CENTRAL_PORTAL_URL
    connect_timeout: int = 180
    client_timeout: int = 180
    transition_max_retries: int = 60
    transition_delay: int = 10
    setup_guide: str = CENTRAL_PORTAL_GUIDE

    def __post_init__(self) -> None:
        """Valide les URLs et les valeurs numériques.

        Raises:
            ValueError: URL vide ou valeur non strictement positive.
        """
        for name in ("nexus_url", "snapshot_repository_url"):
            if not getattr(self, name).strip():
                raise ValueError(
                    f"Le champ '{name}' ne peut pas être vide."
                )
        for name in (
            "connect_timeout",
            "client_timeout",
            "transition_max_retries",
            "transition_delay",
        ):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(
                    f"{name} doit être strictement positif : {value}"
                )

    @property
    def max_transition_wait(self) -> int:
        """Durée max d'attente de transition, en secondes."""
        return self.transition_max_retries * self.transition_delay

    def with_overrides(self, **overrides: Any) -> "NexusSettings":
        """Retourne une copie avec les valeurs non None surchargées."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values)

    def to_dict(self) -> Dict[str, Any]:
        """Sérialise les paramètres pour les rapports."""
        return asdict(self)
