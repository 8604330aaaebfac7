"""Module de validation."""

from commandline_api.validation.base import Validator
from commandline_api.validation.directory_checker import (
    WorkingDirectoryChecker,
)

__all__ = [
    "Validator",
    "WorkingDirectoryChecker",
]
