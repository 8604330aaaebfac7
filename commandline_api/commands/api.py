"""Fonctions de commodité pour lancer des commandes.

Example:
    Pipeline équivalent à « echo -n Hi! | base64 | base64 -d » :

        from commandline_api.commands import run

        result = run("echo -n", "Hi!") | "base64" | "base64 -d"
        assert result.stdout == "Hi!"
"""

from pathlib import Path
from typing import Mapping, Optional, Union

from commandline_api.commands.base import (
    Command,
    CommandExecutor,
    CommandRunResult,
    ExecutorKind,
)
from commandline_api.commands.formatter import (
    AnsiCommandFormatter,
    PlainCommandFormatter,
)
from commandline_api.commands.quoting import split_command
from commandline_api.commands.shell import Shell
from commandline_api.config.models import CommandsConfig
from commandline_api.logging.base import Logger
from commandline_api.logging.file_logger import FileLogger
from commandline_api.prompt import PromptHandler


def run(
    command: str,
    *args: str,
    executor: Optional[CommandExecutor] = None,
    working_directory: Optional[Union[str, Path]] = None,
    environment: Optional[Mapping[str, str]] = None,
) -> CommandRunResult:
    """Exécute une commande décrite par une chaîne et des arguments.

    La chaîne est découpée naïvement sur les blancs, les arguments
    supplémentaires sont ajoutés sans découpage.

    Args:
        command: Programme et premiers arguments (ex: "echo -n").
        *args: Arguments supplémentaires.
        executor: Exécuteur ; défaut : capture des sorties.
        working_directory: Répertoire de travail ; défaut : courant.
        environment: Environnement exact du processus, ou None pour
            hériter de l'environnement courant.

    Returns:
        Le résultat de l'exécution.

    Raises:
        InvalidCommandError: Si la chaîne ne contient aucun programme.
    """
    return Command(
        split_command(command, args),
        executor=executor or CommandExecutor.default(),
        working_directory=Path(working_directory or Path.cwd()),
        environment=environment,
    ).execute()


def echo(
    text: str, executor: Optional[CommandExecutor] = None
) -> CommandRunResult:
    """Exécute « echo -n <text> » pour alimenter un pipeline.

    Example:
        >>> (echo("YmFuYW5h") | "base64 -d").stdout
        'banana'
    """
    return Command(
        ["echo", "-n", text],
        executor=executor or CommandExecutor.default(),
    ).execute()


def executor_from_config(
    config: CommandsConfig,
    kind: ExecutorKind = ExecutorKind.CAPTURE_OUTPUT,
    prompt: Optional[PromptHandler] = None,
    logger: Optional[Logger] = None,
) -> CommandExecutor:
    """Crée un exécuteur à partir de la configuration.

    Un FileLogger est créé si log_file est défini et qu'aucun logger
    n'est fourni.

    Args:
        config: Configuration validée.
        kind: Variante d'exécution (capture ou interactive).
        prompt: Handler d'affichage optionnel.
        logger: Logger optionnel, prioritaire sur log_file.

    Returns:
        L'exécuteur configuré.

    Raises:
        ValueError: Si kind vaut DUMMY (utiliser CommandExecutor.dummy).
    """
    if kind is ExecutorKind.DUMMY:
        raise ValueError(
            "L'exécuteur factice se crée avec CommandExecutor.dummy()."
        )
    if logger is None and config.log_file:
        logger = FileLogger(
            config.log_file,
            level=config.log_level,
            log_format=config.log_format,
        )
    formatter = (
        AnsiCommandFormatter() if config.colored_output
        else PlainCommandFormatter()
    )
    return CommandExecutor(
        kind=kind,
        shell=Shell(config.shell),
        logger=logger,
        prompt=prompt,
        formatter=formatter,
    )
