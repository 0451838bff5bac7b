"""Résolution et validation des credentials de publication.

resolve() choisit la première source complète d'une liste ordonnée ;
validate() évalue des prédicats de présence et dérive l'état ready.
Les deux fonctions sont pures : elles ne lisent que l'environnement
passé en paramètre, ne le modifient pas et ne gardent aucun cache.
Une configuration incomplète est un résultat, jamais une exception.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from maven_publish_utils.credentials.models import (
    CredentialSet,
    CredentialSource,
    EnvLookup,
    FieldSpec,
    FieldStatus,
    Predicate,
    ValidationReport,
)
from maven_publish_utils.errors.exceptions import IncompleteCredentialsError
from maven_publish_utils.logging.base import Logger


def _value(env: EnvLookup, key: str) -> Optional[str]:
    # Chaîne vide et clé absente sont équivalentes
    value = env.get(key)
    return value if value else None


def resolve(
    sources: Sequence[CredentialSource],
    env: EnvLookup,
) -> Optional[CredentialSet]:
    """Retourne le couple de la première source complète.

    Une source partielle (identifiant sans mot de passe ou l'inverse)
    n'empêche pas le repli sur une source suivante complète.

    Args:
        sources: Sources par priorité décroissante.
        env: Environnement interrogé.

    Returns:
        CredentialSet étiqueté avec le nom de la source, ou None
        si aucune source n'est complète.
    """
    for source in sources:
        username = _value(env, source.username_key)
        password = _value(env, source.password_key)
        if username and password:
            return CredentialSet(
                username=username,
                password=password,
                source_name=source.name,
            )
    return None


def validate(
    fields: Sequence[FieldSpec],
    env: EnvLookup,
) -> ValidationReport:
    """Évalue chaque champ indépendamment.

    Args:
        fields: Champs à vérifier, dans l'ordre du rapport.
        env: Environnement interrogé.

    Returns:
        ValidationReport dans l'ordre des champs fournis.
    """
    return ValidationReport(
        fields=tuple(
            FieldStatus(
                name=spec.name,
                present=bool(spec.predicate(env)),
                required=spec.required,
            )
            for spec in fields
        )
    )


def key_present(key: str) -> Predicate:
    """Prédicat : la variable existe et n'est pas vide."""
    def predicate(env: EnvLookup) -> bool:
        return _value(env, key) is not None
    return predicate


def any_key_present(*keys: str) -> Predicate:
    """Prédicat : au moins une des variables est renseignée.

    Utile pour les champs qui acceptent plusieurs noms
    (ex: SIGNING_KEY ou ORG_GRADLE_PROJECT_signingInMemoryKey).
    """
    def predicate(env: EnvLookup) -> bool:
        return any(_value(env, key) is not None for key in keys)
    return predicate


def credential_part_present(
    sources: Sequence[CredentialSource],
    part: str,
) -> Predicate:
    """Prédicat sur un élément du couple résolu.

    Le champ est présent quand une source complète existe : les
    champs username et password suivent donc le même repli que
    resolve().

    Args:
        sources: Sources par priorité décroissante.
        part: "username" ou "password".

    Returns:
        Prédicat env -> bool.

    Raises:
        ValueError: si part n'est pas reconnu.
    """
    if part not in ("username", "password"):
        raise ValueError(
            f"Élément de credential inconnu : {part!r} "
            "(attendu : 'username' ou 'password')"
        )
    sources = tuple(sources)

    def predicate(env: EnvLookup) -> bool:
        credentials = resolve(sources, env)
        return credentials is not None and bool(
            getattr(credentials, part)
        )
    return predicate


@dataclass(frozen=True)
class PublishingStatus:
    """Résultat d'une vérification complète.

    Attributes:
        credentials: Couple résolu ou None.
        report: Rapport de validation des champs.
    """

    credentials: Optional[CredentialSet]
    report: ValidationReport

    @property
    def ready(self) -> bool:
        """True si tous les champs requis sont présents."""
        return self.report.ready

    @property
    def active_source(self) -> Optional[str]:
        """Nom de la source active ou None."""
        if self.credentials is None:
            return None
        return self.credentials.source_name

    def require_ready(self) -> CredentialSet:
        """Retourne les credentials ou lève si la configuration est incomplète.

        Permet à l'appelant d'escalader explicitement un état
        incomplet en erreur.

        Returns:
            Le couple résolu.

        Raises:
            IncompleteCredentialsError: si un champ requis manque
                ou si aucune source n'est complète.
        """
        missing = self.report.missing_required
        if missing or self.credentials is None:
            names = ", ".join(missing) or "credentials"
            raise IncompleteCredentialsError(
                f"Configuration de publication incomplète : {names}",
                missing=missing,
            )
        return self.credentials


class CredentialResolver:
    """Associe une liste de sources et de champs à vérifier.

    Exemple :

        resolver = CredentialResolver(
            sources=[
                CredentialSource("OSSRH", "OSSRH_USERNAME",
                                 "OSSRH_PASSWORD"),
                CredentialSource("CentralPortal",
                                 "CENTRAL_PORTAL_USERNAME",
                                 "CENTRAL_PORTAL_PASSWORD"),
            ],
        )
        status = resolver.check(EnvValueProvider())

    Sans champs explicites, username et password sont requis.

    Attributes:
        _sources: Sources par priorité décroissante.
        _fields: Champs du rapport de validation.
        _logger: Logger optionnel.
    """

    def __init__(
        self,
        sources: Sequence[CredentialSource],
        fields: Optional[Sequence[FieldSpec]] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialise le resolver.

        Args:
            sources: Sources par priorité décroissante.
            fields: Champs à valider. Défaut: username et password
                requis, calculés depuis les sources.
            logger: Logger optionnel (injection de dépendance).
        """
        self._sources = tuple(sources)
        if fields is None:
            fields = (
                FieldSpec(
                    "username",
                    credential_part_present(self._sources, "username"),
                ),
                FieldSpec(
                    "password",
                    credential_part_present(self._sources, "password"),
                ),
            )
        self._fields = tuple(fields)
        self._logger = logger

    @property
    def sources(self) -> tuple[CredentialSource, ...]:
        """Sources, dans l'ordre de priorité."""
        return self._sources

    @property
    def fields(self) -> tuple[FieldSpec, ...]:
        """Champs valides par validate()."""
        return self._fields

    def resolve(self, env: EnvLookup) -> Optional[CredentialSet]:
        """Voir resolve()."""
        credentials = resolve(self._sources, env)
        if self._logger:
            if credentials is None:
                names = ", ".join(s.name for s in self._sources)
                self._logger.log_warning(
                    f"Aucune source de credentials complète "
                    f"parmi : {names}"
                )
            else:
                self._logger.log_info(
                    f"Credentials fournis par la source "
                    f"{credentials.source_name!r}"
                )
        return credentials

    def validate(self, env: EnvLookup) -> ValidationReport:
        """Voir validate()."""
        report = validate(self._fields, env)
        if self._logger and report.missing:
            self._logger.log_info(
                f"Champs absents : {', '.join(report.missing)}"
            )
        return report

    def check(self, env: EnvLookup) -> PublishingStatus:
        """Résout et valide sur le même environnement.

        Args:
            env: Environnement interrogé.

        Returns:
            PublishingStatus combinant couple résolu et rapport.
        """
        return PublishingStatus(
            credentials=self.resolve(env),
            report=self.validate(env),
        )
