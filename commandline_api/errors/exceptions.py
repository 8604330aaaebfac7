"""
Module contenant les exceptions personnalisées de commandline_api.

Ce module suit le principe SRP en isolant la gestion des exceptions.
Les erreurs d'exécution de commandes dérivent toutes de CommandError.
"""
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from commandline_api.commands.base import Command


class ApplicationError(Exception):
    """Exception de base pour toute la bibliothèque."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les configurations."""
    pass


class FileConfigurationError(ConfigurationError):
    """Fichier de configuration illisible ou invalide."""
    pass


class ValidationError(ApplicationError):
    """Exception de base pour toutes les validations."""
    pass


class CommandError(ApplicationError):
    """Exception de base pour l'exécution de commandes externes."""
    pass


class InvalidCommandError(CommandError):
    """Aucun programme à exécuter (liste d'arguments vide)."""
    pass


class PipelinePreconditionError(CommandError):
    """Chaînage impossible : erreur de programmation de l'appelant.

    Levée lors d'un pipe depuis un résultat d'exécuteur interactif
    ou vers une commande vide.
    """
    pass


class LaunchFailureError(CommandError):
    """Le système n'a pas pu lancer le processus."""

    def __init__(
        self,
        command: "Command",
        exit_code: int,
        reason: str
    ) -> None:
        """Initialise l'erreur de lancement.

        Args:
            command: Commande qui n'a pas pu être lancée.
            exit_code: Code de sortie attribué à l'échec.
            reason: Message d'erreur du système.
        """
        self.command = command
        self.exit_code = exit_code
        self.reason = reason
        super().__init__(
            f"Impossible de lancer '{command}' : {reason}"
        )


class NonZeroExitError(CommandError):
    """Une commande s'est terminée avec un code de sortie non nul.

    Attributes:
        command: Commande exécutée.
        exit_code: Code de sortie du processus.
        stdout: Sortie standard capturée.
        stderr: Sortie d'erreur capturée.
    """

    def __init__(
        self,
        command: "Command",
        exit_code: int,
        stdout: str = "",
        stderr: str = "",
        message: Optional[str] = None
    ) -> None:
        self.command = command
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            message
            or f"'{command}' terminée avec le code {exit_code}"
        )
