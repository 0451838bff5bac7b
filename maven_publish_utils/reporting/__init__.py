"""Rapports d'état de publication."""

from maven_publish_utils.reporting.reporter import (
    ConsoleStatusReporter,
    JsonStatusReporter,
    StatusReporter,
)

__all__ = [
    "StatusReporter",
    "ConsoleStatusReporter",
    "JsonStatusReporter",
]
