"""Profils et paramètres de publication Maven Central."""

from maven_publish_utils.publishing.profiles import (
    CENTRAL_PORTAL_SOURCE,
    OSSRH_SOURCE,
    SIGNING_CHECKS,
    PublishingProfile,
    VariableCheck,
    get_profile,
    list_profiles,
    profile_from_config,
)
from maven_publish_utils.publishing.settings import NexusSettings

__all__ = [
    "NexusSettings",
    "PublishingProfile",
    "VariableCheck",
    "CENTRAL_PORTAL_SOURCE",
    "OSSRH_SOURCE",
    "SIGNING_CHECKS",
    "get_profile",
    "list_profiles",
    "profile_from_config",
]
