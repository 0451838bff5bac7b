"""Module de logging."""

from maven_publish_utils.logging.base import Logger
from maven_publish_utils.logging.file_logger import ConsoleLogger, FileLogger

__all__ = [
    "Logger",
    "FileLogger",
    "ConsoleLogger",
]
