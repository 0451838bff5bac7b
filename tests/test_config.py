"""Tests pour le module config."""

import json
import unittest
from pathlib import Path

import pytest
from pydantic import ValidationError

from maven_publish_utils.config import (
    FileConfigLoader,
    PublishingConfigModel,
    load_publishing_config,
)
from maven_publish_utils.errors.exceptions import (
    ConfigurationError,
    FileConfigurationError,
)

TOML_CONFIG = """
profile = "ossrh"

[[sources]]
name = "OSSRH"
username_key = "OSSRH_USERNAME"
password_key = "OSSRH_PASSWORD"

[[checks]]
name = "signingKey"
keys = ["SIGNING_KEY"]
required = true

[nexus]
connect_timeout = 300

[logging]
level = "DEBUG"
"""


class TestFileConfigLoader:
    """Tests pour FileConfigLoader."""

    def test_load_toml(self, tmp_path: Path) -> None:
        """Charge un fichier TOML en dict."""
        path = tmp_path / "publishing.toml"
        path.write_text(TOML_CONFIG)
        data = FileConfigLoader().load(path)
        assert data["profile"] == "ossrh"
        assert data["nexus"]["connect_timeout"] == 300

    def test_load_json(self, tmp_path: Path) -> None:
        """Charge un fichier JSON en dict."""
        path = tmp_path / "publishing.json"
        path.write_text(json.dumps({"profile": "central_portal"}))
        assert FileConfigLoader().load(path) == {
            "profile": "central_portal"
        }

    def test_fichier_absent(self, tmp_path: Path) -> None:
        """Un fichier absent lève FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            FileConfigLoader().load(tmp_path / "absent.toml")

    def test_extension_non_supportee(self, tmp_path: Path) -> None:
        """Une extension inconnue lève ValueError."""
        path = tmp_path / "publishing.yaml"
        path.write_text("profile: ossrh\n")
        with pytest.raises(ValueError, match=".yaml"):
            FileConfigLoader().load(path)

    def test_schema_non_pydantic(self, tmp_path: Path) -> None:
        """Un schéma qui n'est pas un BaseModel lève TypeError."""
        path = tmp_path / "publishing.json"
        path.write_text("{}")
        with pytest.raises(TypeError):
            FileConfigLoader().load(path, schema=dict)


class TestPublishingConfigModel(unittest.TestCase):
    """Tests du schéma Pydantic."""

    def test_defauts(self):
        """Configuration vide : profil central_portal."""
        config = PublishingConfigModel()
        self.assertEqual(config.profile, "central_portal")
        self.assertIsNone(config.sources)
        self.assertIsNone(config.checks)
        self.assertEqual(config.logging.level, "INFO")

    def test_cle_inconnue_refusee(self):
        """extra=forbid rejette les clés inconnues."""
        with self.assertRaises(ValidationError):
            PublishingConfigModel.model_validate({"profil": "ossrh"})

    def test_timeout_negatif_refuse(self):
        """Un timeout non positif est refusé."""
        with self.assertRaises(ValidationError):
            PublishingConfigModel.model_validate(
                {"nexus": {"client_timeout": 0}}
            )

    def test_check_sans_variable_refuse(self):
        """Un champ sans variable est refusé."""
        with self.assertRaises(ValidationError):
            PublishingConfigModel.model_validate(
                {"checks": [{"name": "signingKey", "keys": []}]}
            )

    def test_check_nom_reserve(self):
        """username et password ne peuvent pas être redéclarés."""
        with self.assertRaises(ValidationError):
            PublishingConfigModel.model_validate(
                {"checks": [{"name": "username", "keys": ["U"]}]}
            )


class TestLoadPublishingConfig:
    """Tests de load_publishing_config()."""

    def test_charge_et_valide(self, tmp_path: Path) -> None:
        """Retourne un modèle valide."""
        path = tmp_path / "publishing.toml"
        path.write_text(TOML_CONFIG)
        config = load_publishing_config(path)
        assert isinstance(config, PublishingConfigModel)
        assert config.profile == "ossrh"
        assert config.sources is not None
        assert config.sources[0].username_key == "OSSRH_USERNAME"
        assert config.checks is not None
        assert config.checks[0].required is True
        assert config.nexus.connect_timeout == 300
        assert config.logging.level == "DEBUG"

    def test_fichier_absent(self, tmp_path: Path) -> None:
        """Un fichier absent lève FileConfigurationError."""
        with pytest.raises(FileConfigurationError):
            load_publishing_config(tmp_path / "absent.toml")

    def test_toml_invalide(self, tmp_path: Path) -> None:
        """Un TOML mal forme lève FileConfigurationError."""
        path = tmp_path / "publishing.toml"
        path.write_text("profile = \n")
        with pytest.raises(FileConfigurationError):
            load_publishing_config(path)

    def test_contenu_invalide(self, tmp_path: Path) -> None:
        """Un contenu hors schéma lève ConfigurationError."""
        path = tmp_path / "publishing.json"
        path.write_text(json.dumps({"nexus": {"connect_timeout": -1}}))
        with pytest.raises(ConfigurationError) as excinfo:
            load_publishing_config(path)
        assert not isinstance(excinfo.value, FileConfigurationError)
