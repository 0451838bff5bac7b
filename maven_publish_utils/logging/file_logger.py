"""Implémentations concrètes du logger (fichier et console)."""

import logging
import os
import sys
from typing import Any, Dict, Optional, Tuple

from maven_publish_utils.logging.base import Logger

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _level_and_format(config: Optional[Dict[str, Any]]) -> Tuple[int, str]:
    """Extrait niveau et format d'une configuration.

    Accepte soit la section "logging" directement, soit un dict
    complet contenant une clé "logging".

    Args:
        config: Configuration optionnelle.

    Returns:
        Tuple (niveau logging, format).
    """
    if not config:
        return logging.INFO, DEFAULT_FORMAT
    section = config.get("logging", config)
    if not isinstance(section, dict):
        section = {}
    level_str = str(section.get("level") or "INFO").upper()
    log_format = section.get("format") or DEFAULT_FORMAT
    return getattr(logging, level_str, logging.INFO), log_format


class FileLogger(Logger):
    """
    Logger qui écrit dans un fichier avec option console.

    Caractéristiques:
    - Logger unique par fichier (évite les conflits)
    - Encodage UTF-8 explicite
    - Flush immédiat après chaque log
    - Pas de propagation (évite les logs en double)
    - Support optionnel de la sortie console (stderr)
    """

    def __init__(
        self,
        log_file: str,
        config: Optional[Dict[str, Any]] = None,
        console_output: bool = False
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log
            config: Configuration optionnelle, section "logging"
                    ou dict la contenant. Clés: level, format
            console_output: Activer la sortie console en plus du fichier
        """
        self.log_file = log_file

        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        log_level, log_format = _level_and_format(config)

        self.logger = logging.getLogger(f"maven_publish_utils.file.{log_file}")
        self.logger.setLevel(log_level)

        # Éviter les handlers dupliqués
        if not self.logger.handlers:
            formatter = logging.Formatter(log_format)
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.handler = file_handler

            if console_output:
                console_handler = logging.StreamHandler(sys.stderr)
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)
        else:
            self.handler = self.logger.handlers[0]

        self.logger.propagate = False

    def _flush(self) -> None:
        """Force l'écriture immédiate sur le disque."""
        if hasattr(self, 'handler') and self.handler:
            self.handler.flush()

    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        self.logger.info(message)
        self._flush()

    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        self.logger.warning(message)
        self._flush()

    def log_error(self, message: str) -> None:
        """Log une erreur."""
        self.logger.error(message)
        self._flush()


class ConsoleLogger(Logger):
    """Logger vers stderr, utilisé quand aucun fichier n'est configuré.

    Le niveau par défaut est WARNING pour ne pas polluer le rapport
    imprimé sur stdout.
    """

    def __init__(
        self,
        name: str = "maven_publish_utils",
        config: Optional[Dict[str, Any]] = None,
        level: Optional[int] = None
    ) -> None:
        """Initialise le logger console.

        Args:
            name: Nom du logger stdlib.
            config: Configuration optionnelle (level, format).
            level: Niveau force, prioritaire sur config.
        """
        config_level, log_format = _level_and_format(config)
        if level is None:
            level = config_level if config else logging.WARNING
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        # Un seul handler par nom, lié au sys.stderr courant
        for old in list(self.logger.handlers):
            self.logger.removeHandler(old)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(log_format))
        self.logger.addHandler(handler)
        self.logger.propagate = False

    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        self.logger.info(message)

    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        self.logger.warning(message)

    def log_error(self, message: str) -> None:
        """Log une erreur."""
        self.logger.error(message)
