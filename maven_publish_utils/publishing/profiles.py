"""Profils de publication prédéfinis (Central Portal, OSSRH).

Un profil regroupe les sources de credentials par priorité, les
champs supplémentaires à vérifier et les paramètres Nexus.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from maven_publish_utils.config.schema import PublishingConfigModel
from maven_publish_utils.credentials.models import CredentialSource, FieldSpec
from maven_publish_utils.credentials.resolver import (
    CredentialResolver,
    PublishingStatus,
    any_key_present,
    credential_part_present,
)
from maven_publish_utils.errors.exceptions import ConfigurationError
from maven_publish_utils.logging.base import Logger
from maven_publish_utils.publishing.settings import (
    CENTRAL_PORTAL_GUIDE,
    CENTRAL_PORTAL_URL,
    OSSRH_GUIDE,
    OSSRH_SNAPSHOT_URL,
    OSSRH_URL,
    NexusSettings,
)


@dataclass(frozen=True)
class VariableCheck:
    """Champ vérifié par présence d'une ou plusieurs variables.

    Attributes:
        name: Nom du champ dans le rapport (ex: "signingKey").
        keys: Variables acceptées, la première étant le nom usuel.
        required: True si le champ compte pour l'état ready.
    """

    name: str
    keys: Tuple[str, ...]
    required: bool = False

    def __post_init__(self) -> None:
        """Valide que au moins une variable est déclarée."""
        if not self.keys:
            raise ValueError(
                f"Le champ '{self.name}' doit déclarer au moins "
                "une variable."
            )

    def to_field_spec(self) -> FieldSpec:
        """Convertit en FieldSpec pour validate()."""
        return FieldSpec(
            name=self.name,
            predicate=any_key_present(*self.keys),
            required=self.required,
        )


SIGNING_CHECKS: Tuple[VariableCheck, ...] = (
    VariableCheck("signingKey", ("SIGNING_KEY",)),
    VariableCheck("signingPassword", ("SIGNING_PASSWORD",)),
    VariableCheck("stagingProfileId", ("SONATYPE_STAGING_PROFILE_ID",)),
)

CENTRAL_PORTAL_SOURCE = CredentialSource(
    "CentralPortal", "CENTRAL_PORTAL_USERNAME", "CENTRAL_PORTAL_PASSWORD"
)
OSSRH_SOURCE = CredentialSource(
    "OSSRH", "OSSRH_USERNAME", "OSSRH_PASSWORD"
)


@dataclass(frozen=True)
class PublishingProfile:
    """Profil de publication.

    Attributes:
        name: Identifiant du profil (ex: "central_portal").
        title: Titre affiché dans les rapports.
        sources: Sources de credentials par priorité décroissante.
        checks: Champs vérifiés en plus de username et password.
        settings: Paramètres Nexus.
    """

    name: str
    title: str
    sources: Tuple[CredentialSource, ...]
    checks: Tuple[VariableCheck, ...] = SIGNING_CHECKS
    settings: NexusSettings = field(default_factory=NexusSettings)

    def __post_init__(self) -> None:
        """Un profil sans source ne peut jamais être prêt."""
        if not self.sources:
            raise ValueError(
                f"Le profil '{self.name}' doit déclarer au moins "
                "une source."
            )

    @property
    def fields(self) -> Tuple[FieldSpec, ...]:
        """username, password (requis) puis les champs du profil."""
        return (
            FieldSpec(
                "username",
                credential_part_present(self.sources, "username"),
            ),
            FieldSpec(
                "password",
                credential_part_present(self.sources, "password"),
            ),
        ) + tuple(check.to_field_spec() for check in self.checks)

    @property
    def required_variables(self) -> Tuple[str, ...]:
        """Variables à définir pour atteindre l'état ready.

        Les deux clés de chaque source (une seule paire suffit),
        puis la variable usuelle de chaque champ requis.
        """
        names: List[str] = []
        for source in self.sources:
            names.extend(source.keys)
        names.extend(c.keys[0] for c in self.checks if c.required)
        return tuple(dict.fromkeys(names))

    def missing_variables(self, status: PublishingStatus) -> Tuple[str, ...]:
        """Variables encore absentes pour atteindre l'état ready.

        Les clés des sources ne sont listées que si aucune paire
        n'a été résolue ; s'y ajoute la variable usuelle de chaque
        champ requis absent.

        Args:
            status: Résultat d'une vérification de ce profil.

        Returns:
            Noms des variables, sans doublon.
        """
        names: List[str] = []
        if status.credentials is None:
            for source in self.sources:
                names.extend(source.keys)
        missing = set(status.report.missing_required)
        names.extend(
            c.keys[0] for c in self.checks
            if c.required and c.name in missing
        )
        return tuple(dict.fromkeys(names))

    def resolver(self, logger: Logger | None = None) -> CredentialResolver:
        """Construit le resolver correspondant au profil."""
        return CredentialResolver(
            sources=self.sources,
            fields=self.fields,
            logger=logger,
        )


_BUILTIN_PROFILES: Dict[str, PublishingProfile] = {
    "central_portal": PublishingProfile(
        name="central_portal",
        title="Central Portal",
        sources=(CENTRAL_PORTAL_SOURCE,),
        settings=NexusSettings(),
    ),
    "ossrh": PublishingProfile(
        name="ossrh",
        title="Sonatype OSSRH",
        sources=(OSSRH_SOURCE, CENTRAL_PORTAL_SOURCE),
        settings=NexusSettings(
            nexus_url=OSSRH_URL,
            snapshot_repository_url=OSSRH_SNAPSHOT_URL,
            setup_guide=OSSRH_GUIDE,
        ),
    ),
}


def list_profiles() -> List[str]:
    """Liste les noms des profils prédéfinis."""
    return list(_BUILTIN_PROFILES)


def get_profile(name: str) -> PublishingProfile:
    """Retourne un profil prédéfini.

    Args:
        name: Nom du profil.

    Returns:
        Le profil.

    Raises:
        ConfigurationError: si le profil n'existe pas.
    """
    if name not in _BUILTIN_PROFILES:
        available = ", ".join(f"'{p}'" for p in _BUILTIN_PROFILES)
        raise ConfigurationError(
            f"Profil '{name}' non trouvé. Disponibles: {available}"
        )
    return _BUILTIN_PROFILES[name]


def profile_from_config(
    config: PublishingConfigModel,
) -> PublishingProfile:
    """Construit un profil depuis un fichier de configuration valide.

    Le profil de base est choisi par config.profile ; sources,
    checks et paramètres nexus le surchargent quand ils sont fournis.

    Args:
        config: Configuration validée.

    Returns:
        Le profil résultant.

    Raises:
        ConfigurationError: profil de base inconnu ou valeurs
            incohérentes.
    """
    base = get_profile(config.profile)
    try:
        sources = base.sources
        if config.sources is not None:
            sources = tuple(
                CredentialSource(s.name, s.username_key, s.password_key)
                for s in config.sources
            )
        checks = base.checks
        if config.checks is not None:
            checks = tuple(
                VariableCheck(c.name, tuple(c.keys), c.required)
                for c in config.checks
            )
        return PublishingProfile(
            name=base.name,
            title=base.title,
            sources=sources,
            checks=checks,
            settings=base.settings.with_overrides(
                **config.nexus.model_dump()
            ),
        )
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
