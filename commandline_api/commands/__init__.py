"""Module d'exécution et de chaînage de commandes externes.

Classes disponibles :
    Command : Description immuable d'une commande.
    CommandExecutor : Stratégie d'exécution (capture, interactive,
        factice).
    ExecutorKind : Variantes de CommandExecutor.
    CommandRunResult : Résultat d'une exécution, chaînable avec | .
    CommandBuilder : Constructeur fluent de commandes.
    Shell : Lanceurs de processus (env, sh, bash, zsh).
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Formatage texte brut.
    AnsiCommandFormatter : Formatage ANSI coloré (console).
    ProcessRunner : Lancement des processus via subprocess.

Fonctions disponibles :
    run, echo : Exécution rapide à partir d'une chaîne.
    split_command, quoted : Découpage et protection d'arguments.
    executor_from_config : Exécuteur construit depuis CommandsConfig.
"""

from commandline_api.commands.base import (
    Command,
    CommandExecutor,
    CommandRunResult,
    ExecutorKind,
)
from commandline_api.commands.builder import CommandBuilder
from commandline_api.commands.formatter import (
    AnsiCommandFormatter,
    CommandFormatter,
    PlainCommandFormatter,
)
from commandline_api.commands.quoting import quoted, split_command
from commandline_api.commands.runner import ProcessOutput, ProcessRunner
from commandline_api.commands.shell import (
    COMMAND_NOT_EXECUTABLE,
    COMMAND_NOT_FOUND,
    Shell,
)
from commandline_api.commands.api import echo, executor_from_config, run

__all__ = [
    # Structures de données
    "Command",
    "CommandRunResult",
    "ProcessOutput",
    # Exécution
    "CommandExecutor",
    "ExecutorKind",
    "ProcessRunner",
    "Shell",
    "COMMAND_NOT_FOUND",
    "COMMAND_NOT_EXECUTABLE",
    # Constructeur
    "CommandBuilder",
    # Formateurs
    "CommandFormatter",
    "PlainCommandFormatter",
    "AnsiCommandFormatter",
    # Fonctions
    "run",
    "echo",
    "split_command",
    "quoted",
    "executor_from_config",
]
