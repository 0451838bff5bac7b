"""Schema Pydantic du fichier de configuration de publication.

Exemple (publishing.toml) :

    profile = "ossrh"

    [[sources]]
    name = "OSSRH"
    username_key = "OSSRH_USERNAME"
    password_key = "OSSRH_PASSWORD"

    [[checks]]
    name = "signingKey"
    keys = ["SIGNING_KEY", "ORG_GRADLE_PROJECT_signingInMemoryKey"]
    required = true

    [nexus]
    connect_timeout = 300

    [logging]
    level = "DEBUG"
"""

from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from maven_publish_utils.config.loader import ConfigLoader, FileConfigLoader
from maven_publish_utils.errors.exceptions import (
    ConfigurationError,
    FileConfigurationError,
)


class _StrictModel(BaseModel):
    model_config = {"extra": "forbid"}


class SourceModel(_StrictModel):
    """Source de credentials déclarée dans le fichier."""

    name: str = Field(min_length=1)
    username_key: str = Field(min_length=1)
    password_key: str = Field(min_length=1)


class CheckModel(_StrictModel):
    """Champ supplémentaire à valider (signature, staging...)."""

    name: str = Field(min_length=1)
    keys: List[str] = Field(min_length=1)
    required: bool = False

    @field_validator("name")
    @classmethod
    def reserved_names(cls, v: str) -> str:
        if v in ("username", "password"):
            raise ValueError(
                f"'{v}' est dérivé des sources et ne peut pas "
                "être redéclaré"
            )
        return v


class NexusModel(_StrictModel):
    """Surcharges des paramètres transmis au plugin de publication."""

    nexus_url: Optional[str] = None
    snapshot_repository_url: Optional[str] = None
    connect_timeout: Optional[int] = Field(default=None, gt=0)
    client_timeout: Optional[int] = Field(default=None, gt=0)
    transition_max_retries: Optional[int] = Field(default=None, gt=0)
    transition_delay: Optional[int] = Field(default=None, gt=0)
    setup_guide: Optional[str] = None


class LoggingModel(_StrictModel):
    """Section [logging]."""

    level: str = "INFO"
    format: Optional[str] = None
    file: Optional[str] = None


class PublishingConfigModel(_StrictModel):
    """Fichier de configuration complet.

    Attributes:
        profile: Profil de base (voir publishing.list_profiles()).
        sources: Remplace les sources du profil si fourni.
        checks: Remplace les champs optionnels du profil si fourni.
        nexus: Surcharges des paramètres Nexus.
        logging: Configuration du logging.
    """

    profile: str = "central_portal"
    sources: Optional[List[SourceModel]] = None
    checks: Optional[List[CheckModel]] = None
    nexus: NexusModel = Field(default_factory=NexusModel)
    logging: LoggingModel = Field(default_factory=LoggingModel)


def load_publishing_config(
    config_path: Union[str, Path],
    loader: Optional[ConfigLoader] = None,
) -> PublishingConfigModel:
    """Charge et valide un fichier de configuration de publication.

    Args:
        config_path: Chemin du fichier .toml ou .json.
        loader: Chargeur injectable (défaut: FileConfigLoader).

    Returns:
        Modèle valide.

    Raises:
        FileConfigurationError: fichier absent, illisible ou
            d'extension non supportée.
        ConfigurationError: contenu invalide pour le schema.
    """
    loader = loader or FileConfigLoader()
    try:
        return loader.load(config_path, schema=PublishingConfigModel)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Configuration invalide ({config_path}) : "
            f"{exc.error_count()} erreur(s)\n{exc}"
        ) from exc
    except (OSError, ValueError) as exc:
        raise FileConfigurationError(str(exc)) from exc
