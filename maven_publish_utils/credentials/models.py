"""Modèles de données pour la résolution des credentials.

Ce module définit les dataclasses immuables décrivant les sources
de credentials, le couple résolu et le rapport de validation.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Protocol, Tuple


class EnvLookup(Protocol):
    """Environnement interrogeable clé -> valeur.

    Un dict, un os.environ copié ou un ValueProvider conviennent.
    """

    def get(self, key: str) -> Optional[str]:
        ...  # pragma: no cover


Predicate = Callable[[EnvLookup], bool]


def _require_text(value: str, field_name: str) -> None:
    if not value or not value.strip():
        raise ValueError(
            f"Le champ '{field_name}' ne peut pas être vide."
        )


@dataclass(frozen=True)
class CredentialSource:
    """Source de credentials nommée et ordonnée.

    Attributes:
        name: Libellé de la source (ex: "OSSRH", "CentralPortal").
        username_key: Clé de l'identifiant (ex: "OSSRH_USERNAME").
        password_key: Clé du mot de passe (ex: "OSSRH_PASSWORD").
    """

    name: str
    username_key: str
    password_key: str

    def __post_init__(self) -> None:
        """Valide les champs après initialisation."""
        _require_text(self.name, "name")
        _require_text(self.username_key, "username_key")
        _require_text(self.password_key, "password_key")

    @property
    def keys(self) -> Tuple[str, str]:
        """Retourne le couple (username_key, password_key)."""
        return (self.username_key, self.password_key)


@dataclass(frozen=True)
class CredentialSet:
    """Couple de credentials résolu.

    Le mot de passe est exclu du repr pour ne jamais fuiter
    dans les logs ou les traces.

    Attributes:
        username: Identifiant résolu.
        password: Mot de passe ou token résolu.
        source_name: Nom de la source qui l'a fourni.
    """

    username: str
    password: str = field(repr=False)
    source_name: str


@dataclass(frozen=True)
class FieldSpec:
    """Champ à valider : nom, prédicat de présence, caractère requis.

    Attributes:
        name: Nom du champ (ex: "username", "signingKey").
        predicate: Fonction env -> bool indiquant la présence.
        required: True si le champ compte pour l'état ready.
    """

    name: str
    predicate: Predicate = field(compare=False)
    required: bool = True

    def __post_init__(self) -> None:
        """Valide le nom du champ."""
        _require_text(self.name, "name")


@dataclass(frozen=True)
class FieldStatus:
    """État d'un champ après validation."""

    name: str
    present: bool
    required: bool = True


@dataclass(frozen=True)
class ValidationReport:
    """Rapport de validation d'une configuration de publication.

    L'ordre des champs est celui fourni par l'appelant.

    Attributes:
        fields: États des champs, dans l'ordre de déclaration.
    """

    fields: Tuple[FieldStatus, ...] = ()

    @property
    def ready(self) -> bool:
        """True si tous les champs requis sont présents."""
        return all(f.present for f in self.fields if f.required)

    @property
    def present(self) -> Tuple[str, ...]:
        """Noms des champs présents."""
        return tuple(f.name for f in self.fields if f.present)

    @property
    def missing(self) -> Tuple[str, ...]:
        """Noms des champs absents (requis ou optionnels)."""
        return tuple(f.name for f in self.fields if not f.present)

    @property
    def missing_required(self) -> Tuple[str, ...]:
        """Noms des champs requis absents."""
        return tuple(
            f.name for f in self.fields
            if f.required and not f.present
        )

    def is_present(self, name: str) -> bool:
        """Indique si le champ nommé est présent.

        Args:
            name: Nom du champ.

        Returns:
            True si présent, False si absent ou inconnu.
        """
        return any(f.name == name and f.present for f in self.fields)

    def as_dict(self) -> Dict[str, bool]:
        """Retourne {nom: present} en conservant l'ordre des champs."""
        return {f.name: f.present for f in self.fields}
