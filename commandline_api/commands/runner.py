"""Lancement des processus via subprocess.

Ce module fournit ProcessRunner, qui réalise les deux stratégies
d'exécution réelles (capture et interactive) pour CommandExecutor.

Règles communes :
    - Le programme est toujours lancé via un lanceur (/usr/bin/env par
      défaut), jamais par chemin direct.
    - Un environnement défini sur la commande REMPLACE entièrement
      celui du processus courant (aucune fusion avec os.environ).
    - L'appel bloque jusqu'à la fin du processus, sans timeout.
    - Un échec de lancement ne lève pas d'exception : il produit un
      code de sortie 127 (programme ou répertoire introuvable) ou 126
      (non exécutable, argument refusé par subprocess).

Example :
    Utilisation directe (normalement réalisée par CommandExecutor) :

        runner = ProcessRunner(Shell.ENV, logger=logger)
        output = runner.run_captured(Command(["ls", "-la"]))
        print(output.exit_code, output.stdout)
"""

import os
import subprocess  # nosec B404
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional

from commandline_api.commands.formatter import PlainCommandFormatter
from commandline_api.commands.shell import (
    COMMAND_NOT_EXECUTABLE,
    COMMAND_NOT_FOUND,
    Shell,
    resolve_shell,
)
from commandline_api.logging.base import Logger
from commandline_api.validation.directory_checker import (
    WorkingDirectoryChecker,
)

if TYPE_CHECKING:
    from commandline_api.commands.base import Command


@dataclass(frozen=True)
class ProcessOutput:
    """Sorties brutes d'un processus terminé.

    Attributes:
        exit_code: Code de sortie (128 + numéro du signal si le
            processus a été tué par un signal).
        stdout: Sortie standard complète, vide si non capturée.
        stderr: Sortie d'erreur complète, vide si non capturée.
        launched: False si le processus n'a jamais démarré.
    """

    exit_code: int
    stdout: bytes = b""
    stderr: bytes = b""
    launched: bool = True


def build_child_environment(
    environment: Optional[Mapping[str, str]],
) -> Optional[Dict[str, str]]:
    """Construit l'environnement transmis au processus enfant.

    None signifie « hériter de l'environnement courant » (subprocess
    utilise alors os.environ). Sinon, le dictionnaire retourné est
    exactement celui de la commande, même vide : aucune variable du
    processus courant n'est ajoutée.

    Args:
        environment: Environnement défini sur la commande.

    Returns:
        Copie de l'environnement ou None.
    """
    if environment is None:
        return None
    return dict(environment)


def normalize_exit_code(returncode: int) -> int:
    """Convertit un returncode subprocess en code de sortie shell.

    subprocess signale un processus tué par le signal N avec -N ;
    comme un shell, on retourne 128 + N.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


class ProcessRunner:
    """Lance les processus d'une commande via subprocess.

    Attributes:
        _shell: Lanceur configuré (peut être remplacé par sh pour une
            commande en une seule chaîne contenant un pipe).
        _logger: Logger optionnel.
        _is_root: True si le processus courant est root (uid 0).
        _plain: Formateur texte brut des messages de log.
    """

    def __init__(
        self,
        shell: Shell = Shell.ENV,
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialise le runner.

        Args:
            shell: Lanceur des processus.
            logger: Logger optionnel pour tracer les exécutions.
        """
        self._shell = shell
        self._logger = logger
        self._is_root: bool = os.getuid() == 0
        self._plain = PlainCommandFormatter()

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    def _log_debug(self, message: str) -> None:
        if self._logger:
            self._logger.log_debug(message)

    def _log_error(self, message: str) -> None:
        if self._logger:
            self._logger.log_error(message)

    def build_argv(self, command: "Command") -> List[str]:
        """Retourne la ligne de commande réellement lancée.

        Args:
            command: Commande à lancer.

        Returns:
            Liste d'arguments incluant le lanceur.
        """
        shell = resolve_shell(self._shell, command.arguments)
        argv = shell.build_argv(command.arguments)
        self._log_debug(f"Ligne de commande : {argv}")
        return argv

    def _launch_failure(
        self,
        command: "Command",
        error: Exception,
        exit_code: Optional[int] = None,
    ) -> ProcessOutput:
        """Construit le résultat d'un processus qui n'a pas démarré.

        Args:
            command: Commande concernée.
            error: Erreur levée lors du lancement.
            exit_code: Code imposé ; par défaut 127 pour un programme
                introuvable, 126 sinon (permission, argument invalide).

        Returns:
            ProcessOutput avec launched=False et le message sur stderr.
        """
        if exit_code is None:
            exit_code = (
                COMMAND_NOT_FOUND if isinstance(error, FileNotFoundError)
                else COMMAND_NOT_EXECUTABLE
            )
        self._log_error(f"Erreur système : {command} : {error}")
        return ProcessOutput(
            exit_code=exit_code,
            stderr=f"{error}\n".encode("utf-8"),
            launched=False,
        )

    def _finish(
        self, command: "Command", returncode: int
    ) -> int:
        exit_code = normalize_exit_code(returncode)
        if exit_code != 0:
            self._log_error(
                self._plain.format_exit(command.arguments, exit_code)
            )
        return exit_code

    def run_captured(self, command: "Command") -> ProcessOutput:
        """Exécute la commande en capturant stdout et stderr.

        Si la commande provient d'un pipe, la sortie de l'étape
        précédente est transmise sur l'entrée standard ; sinon
        l'entrée standard est héritée. Les deux sorties sont
        entièrement lues à la fin du processus.

        Args:
            command: Commande à exécuter.

        Returns:
            ProcessOutput avec les sorties capturées.
        """
        self._log(
            self._plain.format_start(command.arguments, self._is_root)
        )
        try:
            WorkingDirectoryChecker(command.working_directory).validate()
        except ValueError as e:
            return self._launch_failure(command, e, COMMAND_NOT_FOUND)
        try:
            proc = subprocess.run(  # nosec B603
                self.build_argv(command),
                input=command.input_source,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                cwd=command.working_directory,
                env=build_child_environment(command.environment),
            )
        except (OSError, ValueError) as e:
            return self._launch_failure(command, e)

        return ProcessOutput(
            exit_code=self._finish(command, proc.returncode),
            stdout=proc.stdout,
            stderr=proc.stderr,
        )

    def run_interactive(self, command: "Command") -> ProcessOutput:
        """Exécute la commande reliée au terminal courant.

        stdin, stdout et stderr du processus enfant sont ceux du
        processus courant ; rien n'est capturé.

        Args:
            command: Commande à exécuter.

        Returns:
            ProcessOutput avec des sorties vides.
        """
        self._log(
            self._plain.format_start_interactive(
                command.arguments, self._is_root
            )
        )
        try:
            WorkingDirectoryChecker(command.working_directory).validate()
        except ValueError as e:
            return self._launch_failure(command, e, COMMAND_NOT_FOUND)
        try:
            proc = subprocess.run(  # nosec B603
                self.build_argv(command),
                cwd=command.working_directory,
                env=build_child_environment(command.environment),
            )
        except (OSError, ValueError) as e:
            return self._launch_failure(command, e)

        return ProcessOutput(
            exit_code=self._finish(command, proc.returncode)
        )
