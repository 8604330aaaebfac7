"""
CommandLine API - Bibliothèque utilitaire pour scripts en ligne de commande.

Modules disponibles:
- commands: Exécution et chaînage de commandes externes (Command,
  CommandExecutor, CommandRunResult, run, echo)
- prompt: Affichage et saisie console (PromptHandler)
- environment: Accès aux variables d'environnement (Environment, env)
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions et handlers d'erreurs
- config: Chargement de configuration (TOML, JSON, Pydantic)
- validation: Validation du répertoire de travail
"""

__version__ = "1.0.0"

from commandline_api.logging import Logger, FileLogger
from commandline_api.errors import (
    ApplicationError,
    CommandError,
    InvalidCommandError,
    LaunchFailureError,
    PipelinePreconditionError,
    NonZeroExitError,
)
from commandline_api.prompt import (
    PromptHandler,
    ConsolePromptHandler,
    get_prompt_handler,
    set_prompt_handler,
)
from commandline_api.environment import (
    Environment,
    ProcessEnvironment,
    InMemoryEnvironment,
    env,
)
from commandline_api.config import (
    CommandsConfig,
    CommandsConfigLoader,
    FileConfigLoader,
)
from commandline_api.commands import (
    Command,
    CommandBuilder,
    CommandExecutor,
    CommandRunResult,
    ExecutorKind,
    Shell,
    echo,
    executor_from_config,
    quoted,
    run,
    split_command,
)

__all__ = [
    # Commandes
    "Command",
    "CommandBuilder",
    "CommandExecutor",
    "CommandRunResult",
    "ExecutorKind",
    "Shell",
    "run",
    "echo",
    "quoted",
    "split_command",
    "executor_from_config",
    # Console
    "PromptHandler",
    "ConsolePromptHandler",
    "get_prompt_handler",
    "set_prompt_handler",
    # Environnement
    "Environment",
    "ProcessEnvironment",
    "InMemoryEnvironment",
    "env",
    # Logging
    "Logger",
    "FileLogger",
    # Configuration
    "CommandsConfig",
    "CommandsConfigLoader",
    "FileConfigLoader",
    # Erreurs
    "ApplicationError",
    "CommandError",
    "InvalidCommandError",
    "LaunchFailureError",
    "PipelinePreconditionError",
    "NonZeroExitError",
]
