"""Rapports d'état de la configuration de publication.

Ce module fournit les implémentations de StatusReporter pour
générer un rapport lisible en console ou un document JSON. Aucun
rapport n'inclut de valeur secrète.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from maven_publish_utils.credentials.resolver import PublishingStatus
from maven_publish_utils.publishing.profiles import PublishingProfile

CHECK_MARK = "✓"
CROSS_MARK = "✗"


class StatusReporter(ABC):
    """Interface pour les rapports d'état."""

    @abstractmethod
    def report(
        self,
        status: PublishingStatus,
        profile: PublishingProfile,
    ) -> str:
        """Génère le rapport.

        Args:
            status: Résultat de la vérification.
            profile: Profil vérifié.

        Returns:
            Contenu du rapport.
        """
        pass


class ConsoleStatusReporter(StatusReporter):
    """Rapport texte pour la console."""

    def report(
        self,
        status: PublishingStatus,
        profile: PublishingProfile,
    ) -> str:
        """Génère le bloc d'état d'une vérification.

        Une ligne par champ, la source active, puis soit la liste
        des variables à définir avec le guide, soit le message
        de disponibilité.

        Args:
            status: Résultat de la vérification.
            profile: Profil vérifié.

        Returns:
            Rapport multi-lignes terminé par un saut de ligne.
        """
        lines = [f"=== {profile.title} Configuration ==="]
        required = {f.name: f.required for f in status.report.fields}
        for name, present in status.report.as_dict().items():
            mark = CHECK_MARK if present else CROSS_MARK
            suffix = "" if required[name] else " (optional)"
            lines.append(f"{name} configured: {mark}{suffix}")
        lines.append(
            f"Active source: {status.active_source or 'none'}"
        )
        lines.append("")

        if not status.ready:
            if status.credentials is None:
                lines.append(f"⚠️  Missing {profile.title} credentials")
            else:
                lines.append(f"⚠️  Incomplete {profile.title} configuration")
            lines.append("Required environment variables:")
            if status.credentials is None and len(profile.sources) > 1:
                lines.append("(one complete username/password pair)")
            for variable in profile.missing_variables(status):
                lines.append(f"• {variable}")
            lines.append("")
            lines.append(f"📚 Setup guide: {profile.settings.setup_guide}")
        else:
            lines.append(f"✅ {profile.title} credentials configured")
            lines.append("Ready for automated publishing!")
        return "\n".join(lines) + "\n"


class JsonStatusReporter(StatusReporter):
    """Rapport au format JSON.

    Attributes:
        _indent: Indentation du document.
    """

    def __init__(self, indent: int = 2) -> None:
        """Initialise le reporter JSON.

        Args:
            indent: Indentation du document.
        """
        self._indent = indent

    @staticmethod
    def to_dict(
        status: PublishingStatus,
        profile: PublishingProfile,
    ) -> Dict[str, Any]:
        """Structure sérialisable du rapport."""
        missing: List[str] = list(status.report.missing)
        return {
            "profile": profile.name,
            "ready": status.ready,
            "active_source": status.active_source,
            "fields": status.report.as_dict(),
            "missing": missing,
            "missing_required": list(status.report.missing_required),
            "settings": profile.settings.to_dict(),
        }

    def report(
        self,
        status: PublishingStatus,
        profile: PublishingProfile,
    ) -> str:
        """Génère le rapport JSON.

        Args:
            status: Résultat de la vérification.
            profile: Profil vérifié.

        Returns:
            Contenu JSON.
        """
        return json.dumps(
            self.to_dict(status, profile),
            indent=self._indent,
            ensure_ascii=False,
        )
