"""Module de gestion des erreurs."""

from commandline_api.errors.base import ErrorHandler, ErrorHandlerChain
from commandline_api.errors.exceptions import (ApplicationError,
                                               ConfigurationError,
                                               FileConfigurationError,
                                               ValidationError,
                                               CommandError,
                                               InvalidCommandError,
                                               LaunchFailureError,
                                               PipelinePreconditionError,
                                               NonZeroExitError)
from commandline_api.errors.console_handler import ConsoleErrorHandler
from commandline_api.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "ValidationError",
    "CommandError",
    "InvalidCommandError",
    "LaunchFailureError",
    "PipelinePreconditionError",
    "NonZeroExitError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
