"""Commande maven-publish-check.

Vérifie que les credentials de publication Maven Central sont
disponibles et imprime un rapport d'état.

Exemples:
    maven-publish-check                        # profil central_portal
    maven-publish-check --profile ossrh --dotenv .env
    maven-publish-check --config publishing.toml --format json --strict
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from maven_publish_utils import __version__
from maven_publish_utils.config.schema import (
    PublishingConfigModel,
    load_publishing_config,
)
from maven_publish_utils.credentials.chain import ProviderChain
from maven_publish_utils.errors.base import ErrorHandlerChain
from maven_publish_utils.errors.console_handler import ConsoleErrorHandler
from maven_publish_utils.errors.exceptions import ApplicationError
from maven_publish_utils.errors.logger_handler import LoggerErrorHandler
from maven_publish_utils.logging.base import Logger
from maven_publish_utils.logging.file_logger import ConsoleLogger, FileLogger
from maven_publish_utils.publishing.profiles import (
    PublishingProfile,
    get_profile,
    list_profiles,
    profile_from_config,
)
from maven_publish_utils.reporting.reporter import (
    ConsoleStatusReporter,
    JsonStatusReporter,
    StatusReporter,
)

PROG = "maven-publish-check"


def build_parser() -> argparse.ArgumentParser:
    """Construit le parser d'arguments."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=__doc__,
    )
    parser.add_argument(
        "--profile",
        choices=list_profiles(),
        default=None,
        help="Profil de publication (défaut: central_portal, "
             "ou celui du fichier de configuration)",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Fichier de configuration .toml ou .json",
    )
    parser.add_argument(
        "--dotenv",
        metavar="FILE",
        help="Fichier .env consulté après l'environnement",
    )
    parser.add_argument(
        "--keyring-service",
        metavar="NAME",
        help="Service keyring consulté en dernier recours",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Format du rapport (défaut: text)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Code de sortie 1 si la configuration est incomplète",
    )
    parser.add_argument(
        "--log-file",
        metavar="FILE",
        help="Journaliser dans ce fichier",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Journaliser la résolution sur stderr",
    )
    parser.add_argument(
        "--list-profiles",
        action="store_true",
        help="Afficher les profils disponibles et quitter",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _make_logger(
    args: argparse.Namespace,
    config: Optional[PublishingConfigModel],
) -> Logger:
    logging_cfg = config.logging.model_dump() if config else {}
    log_file = args.log_file or logging_cfg.get("file")
    if log_file:
        return FileLogger(
            log_file,
            config={"logging": logging_cfg},
            console_output=args.verbose,
        )
    if args.verbose:
        return ConsoleLogger(config=logging_cfg, level=logging.INFO)
    if config is not None:
        return ConsoleLogger(config=logging_cfg)
    return ConsoleLogger()


def _select_profile(
    args: argparse.Namespace,
    config: Optional[PublishingConfigModel],
) -> PublishingProfile:
    if config is None:
        return get_profile(args.profile or "central_portal")
    if args.profile:
        config = config.model_copy(update={"profile": args.profile})
    return profile_from_config(config)


def run(args: argparse.Namespace, stdout: TextIO) -> int:
    """Exécute la vérification.

    Args:
        args: Arguments analysés.
        stdout: Flux où le rapport est imprimé.

    Returns:
        Code de sortie.
    """
    if args.list_profiles:
        for name in list_profiles():
            print(name, file=stdout)
        return 0

    errors = ErrorHandlerChain()
    errors.add_handler(ConsoleErrorHandler())
    logger: Logger = ConsoleLogger()
    try:
        config = (
            load_publishing_config(args.config) if args.config else None
        )
        logger = _make_logger(args, config)
        errors.add_handler(LoggerErrorHandler(logger))

        profile = _select_profile(args, config)
        env = ProviderChain.default(
            dotenv_path=args.dotenv,
            keyring_service=args.keyring_service,
            logger=logger,
        )
        status = profile.resolver(logger=logger).check(env)

        reporter: StatusReporter = (
            JsonStatusReporter() if args.format == "json"
            else ConsoleStatusReporter()
        )
        print(reporter.report(status, profile), file=stdout)

        if args.strict:
            status.require_ready()
    except ApplicationError as exc:
        errors.handle(exc)
        return errors.exit_code_for(exc)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Point d'entrée de la commande."""
    args = build_parser().parse_args(argv)
    return run(args, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
