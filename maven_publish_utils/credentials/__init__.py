"""Module de résolution des credentials de publication Maven Central.

Fournit une liste ordonnée de sources (OSSRH, Central Portal...) dont
la première complète gagne, et un rapport de validation des champs
requis ou optionnels (signature GPG, staging profile).

L'environnement est injecté : un dict, ou une chaîne de providers
    variables du processus -> fichier .env (python-dotenv) -> keyring

Exemple d'utilisation :

    from maven_publish_utils.credentials import (
        CredentialSource, ProviderChain, resolve,
    )

    env = ProviderChain.default(dotenv_path=".env")
    credentials = resolve(
        [
            CredentialSource("OSSRH", "OSSRH_USERNAME", "OSSRH_PASSWORD"),
            CredentialSource("CentralPortal", "CENTRAL_PORTAL_USERNAME",
                             "CENTRAL_PORTAL_PASSWORD"),
        ],
        env,
    )
"""

from maven_publish_utils.credentials.base import ValueProvider
from maven_publish_utils.credentials.chain import ProviderChain
from maven_publish_utils.credentials.models import (
    CredentialSet,
    CredentialSource,
    EnvLookup,
    FieldSpec,
    FieldStatus,
    ValidationReport,
)
from maven_publish_utils.credentials.providers import (
    DotEnvValueProvider,
    EnvValueProvider,
    KeyringUnavailableError,
    KeyringValueProvider,
    MappingValueProvider,
)
from maven_publish_utils.credentials.resolver import (
    CredentialResolver,
    PublishingStatus,
    any_key_present,
    credential_part_present,
    key_present,
    resolve,
    validate,
)

__all__ = [
    # ABC
    "ValueProvider",
    "EnvLookup",
    # Modèles
    "CredentialSource",
    "CredentialSet",
    "FieldSpec",
    "FieldStatus",
    "ValidationReport",
    # Providers
    "EnvValueProvider",
    "MappingValueProvider",
    "DotEnvValueProvider",
    "KeyringValueProvider",
    "KeyringUnavailableError",
    "ProviderChain",
    # Résolution
    "resolve",
    "validate",
    "key_present",
    "any_key_present",
    "credential_part_present",
    "CredentialResolver",
    "PublishingStatus",
]
