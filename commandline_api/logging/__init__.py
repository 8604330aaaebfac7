"""Module de logging."""

from commandline_api.logging.base import Logger
from commandline_api.logging.file_logger import DEFAULT_LOG_FORMAT, FileLogger

__all__ = [
    "Logger",
    "FileLogger",
    "DEFAULT_LOG_FORMAT",
]
