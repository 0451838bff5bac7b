"""Tests de la résolution et de la validation des credentials."""

from unittest.mock import MagicMock

import pytest

from maven_publish_utils.credentials.models import (
    CredentialSet,
    CredentialSource,
    FieldSpec,
)
from maven_publish_utils.credentials.providers.env import (
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
from maven_publish_utils.errors.exceptions import IncompleteCredentialsError

OSSRH = CredentialSource("OSSRH", "OSSRH_USERNAME", "OSSRH_PASSWORD")
PORTAL = CredentialSource(
    "Portal", "CENTRAL_PORTAL_USERNAME", "CENTRAL_PORTAL_PASSWORD"
)
SOURCES = [OSSRH, PORTAL]


class TestResolve:
    """Tests de resolve()."""

    def test_environnement_vide(self) -> None:
        """Sans variable, resolve() retourne None."""
        assert resolve(SOURCES, {}) is None

    def test_liste_de_sources_vide(self) -> None:
        """Sans source, resolve() retourne None."""
        assert resolve([], {"OSSRH_USERNAME": "u"}) is None

    def test_repli_sur_la_seconde_source(self) -> None:
        """Seule la source Portal est complète."""
        env = {
            "CENTRAL_PORTAL_USERNAME": "u",
            "CENTRAL_PORTAL_PASSWORD": "p",
        }
        assert resolve(SOURCES, env) == CredentialSet(
            username="u", password="p", source_name="Portal"
        )

    def test_priorite_respectee(self) -> None:
        """Si les deux sources sont complètes, la première gagne."""
        env = {
            "OSSRH_USERNAME": "ou",
            "OSSRH_PASSWORD": "op",
            "CENTRAL_PORTAL_USERNAME": "cu",
            "CENTRAL_PORTAL_PASSWORD": "cp",
        }
        result = resolve(SOURCES, env)
        assert result is not None
        assert result.source_name == "OSSRH"
        assert result.username == "ou"

    def test_source_partielle_ne_bloque_pas_le_repli(self) -> None:
        """Un OSSRH partiel laisse passer un Portal complet."""
        env = {
            "OSSRH_USERNAME": "ou",
            "CENTRAL_PORTAL_USERNAME": "cu",
            "CENTRAL_PORTAL_PASSWORD": "cp",
        }
        result = resolve(SOURCES, env)
        assert result is not None
        assert result.source_name == "Portal"

    def test_chaine_vide_equivaut_a_absente(self) -> None:
        """username vide rend la source incomplète."""
        env = {"OSSRH_USERNAME": "", "OSSRH_PASSWORD": "x"}
        assert resolve([OSSRH], env) is None

    def test_valeur_none_equivaut_a_absente(self) -> None:
        """Une valeur None est traitée comme absente."""
        env = {"OSSRH_USERNAME": None, "OSSRH_PASSWORD": "x"}
        assert resolve([OSSRH], env) is None

    def test_idempotence(self) -> None:
        """Deux appels sur le même instantané donnent le même résultat."""
        env = {"OSSRH_USERNAME": "u", "OSSRH_PASSWORD": "p"}
        assert resolve(SOURCES, env) == resolve(SOURCES, env)

    def test_ne_modifie_pas_l_environnement(self) -> None:
        """resolve() ne modifie pas l'environnement fourni."""
        env = {"OSSRH_USERNAME": "u", "OSSRH_PASSWORD": ""}
        snapshot = dict(env)
        resolve(SOURCES, env)
        assert env == snapshot

    def test_accepte_un_value_provider(self) -> None:
        """Un ValueProvider sert d'environnement."""
        env = MappingValueProvider(
            {"OSSRH_USERNAME": "u", "OSSRH_PASSWORD": "p"}
        )
        result = resolve(SOURCES, env)
        assert result is not None
        assert result.source_name == "OSSRH"


class TestPredicats:
    """Tests des prédicats de présence."""

    def test_key_present(self) -> None:
        """key_present suit la règle chaîne vide == absente."""
        predicate = key_present("SIGNING_KEY")
        assert predicate({"SIGNING_KEY": "k"}) is True
        assert predicate({"SIGNING_KEY": ""}) is False
        assert predicate({}) is False

    def test_any_key_present(self) -> None:
        """any_key_present accepte l'une des variables."""
        predicate = any_key_present("A", "B")
        assert predicate({"B": "x"}) is True
        assert predicate({"A": "", "B": ""}) is False

    def test_credential_part_present_suit_le_repli(self) -> None:
        """username présent seulement si une source est complète."""
        predicate = credential_part_present(SOURCES, "username")
        assert predicate({"OSSRH_USERNAME": "u"}) is False
        assert predicate({
            "CENTRAL_PORTAL_USERNAME": "u",
            "CENTRAL_PORTAL_PASSWORD": "p",
        }) is True

    def test_credential_part_inconnu(self) -> None:
        """Un élément inconnu lève ValueError."""
        with pytest.raises(ValueError, match="token"):
            credential_part_present(SOURCES, "token")


class TestValidate:
    """Tests de validate()."""

    def _fields(self) -> list[FieldSpec]:
        return [
            FieldSpec("username",
                      credential_part_present(SOURCES, "username")),
            FieldSpec("password",
                      credential_part_present(SOURCES, "password")),
            FieldSpec("signingKey", key_present("SIGNING_KEY"),
                      required=False),
            FieldSpec("stagingProfileId",
                      key_present("SONATYPE_STAGING_PROFILE_ID"),
                      required=False),
        ]

    def test_environnement_vide(self) -> None:
        """Sans variable, ready est False et tout manque."""
        report = validate(self._fields()[:2], {})
        assert report.ready is False
        assert report.missing == ("username", "password")

    def test_ordre_des_champs_conserve(self) -> None:
        """Le rapport suit l'ordre fourni."""
        fields = list(reversed(self._fields()))
        report = validate(fields, {})
        assert [f.name for f in report.fields] == [
            "stagingProfileId", "signingKey", "password", "username",
        ]

    def test_optionnels_absents_ready(self) -> None:
        """Les champs optionnels absents n'empêchent pas ready."""
        env = {"OSSRH_USERNAME": "u", "OSSRH_PASSWORD": "p"}
        report = validate(self._fields(), env)
        assert report.ready is True
        assert report.missing == ("signingKey", "stagingProfileId")
        assert report.missing_required == ()

    def test_champ_optionnel_rendu_requis(self) -> None:
        """Le caractère requis est décidé par l'appelant."""
        env = {"OSSRH_USERNAME": "u", "OSSRH_PASSWORD": "p"}
        fields = self._fields()[:2] + [
            FieldSpec("stagingProfileId",
                      key_present("SONATYPE_STAGING_PROFILE_ID")),
        ]
        report = validate(fields, env)
        assert report.ready is False
        assert report.missing_required == ("stagingProfileId",)

    def test_idempotence(self) -> None:
        """Deux appels sur le même instantané sont égaux."""
        env = {"SIGNING_KEY": "k"}
        assert validate(self._fields(), env) == validate(
            self._fields(), env
        )

    def test_predicats_evalues_independamment(self) -> None:
        """Chaque prédicat est appelé une fois avec l'environnement."""
        env = {"K": "v"}
        first = MagicMock(return_value=True)
        second = MagicMock(return_value=False)
        report = validate(
            [FieldSpec("a", first), FieldSpec("b", second)], env
        )
        first.assert_called_once_with(env)
        second.assert_called_once_with(env)
        assert report.as_dict() == {"a": True, "b": False}


class TestCredentialResolver:
    """Tests de CredentialResolver et PublishingStatus."""

    def test_champs_par_defaut(self) -> None:
        """Sans champs explicites, username et password sont requis."""
        resolver = CredentialResolver(SOURCES)
        assert [f.name for f in resolver.fields] == ["username", "password"]
        assert all(f.required for f in resolver.fields)

    def test_check_pret(self) -> None:
        """check() combine couple résolu et rapport."""
        resolver = CredentialResolver(SOURCES)
        status = resolver.check({
            "CENTRAL_PORTAL_USERNAME": "u",
            "CENTRAL_PORTAL_PASSWORD": "p",
        })
        assert status.ready is True
        assert status.active_source == "Portal"
        assert status.require_ready().username == "u"

    def test_check_incomplet(self) -> None:
        """Un état incomplet est une donnée, pas une exception."""
        resolver = CredentialResolver(SOURCES)
        status = resolver.check({})
        assert status.ready is False
        assert status.credentials is None
        assert status.active_source is None

    def test_require_ready_leve(self) -> None:
        """require_ready() escalade l'état incomplet."""
        status = CredentialResolver(SOURCES).check({})
        with pytest.raises(IncompleteCredentialsError) as excinfo:
            status.require_ready()
        assert excinfo.value.missing == ("username", "password")

    def test_require_ready_sans_credentials_avec_champs_custom(self) -> None:
        """Sans couple résolu, require_ready() lève même si ready."""
        status = PublishingStatus(
            credentials=None,
            report=CredentialResolver(SOURCES, fields=[]).validate({}),
        )
        assert status.ready is True
        with pytest.raises(IncompleteCredentialsError):
            status.require_ready()

    def test_log_source_active(self) -> None:
        """Le resolver journalise la source, jamais le mot de passe."""
        mock_logger = MagicMock()
        resolver = CredentialResolver(SOURCES, logger=mock_logger)
        resolver.resolve({"OSSRH_USERNAME": "u", "OSSRH_PASSWORD": "s3cr3t"})
        message = mock_logger.log_info.call_args[0][0]
        assert "OSSRH" in message
        assert "s3cr3t" not in message

    def test_log_warning_si_aucune_source(self) -> None:
        """Un warning liste les sources essayées."""
        mock_logger = MagicMock()
        CredentialResolver(SOURCES, logger=mock_logger).resolve({})
        message = mock_logger.log_warning.call_args[0][0]
        assert "OSSRH" in message and "Portal" in message
