"""Structures de données pour l'exécution et le chaînage de commandes.

Ce module définit :
    - ExecutorKind : Les trois stratégies d'exécution.
    - CommandExecutor : Stratégie d'exécution (capture, interactive,
      factice), immuable et sans état.
    - Command : Description immuable d'un appel de programme externe.
    - CommandRunResult : Résultat immuable d'une exécution, chaînable
      vers une nouvelle commande via pipe() ou l'opérateur |.

Le chaînage exécute les étapes l'une après l'autre : l'étape N+1
démarre après la fin de l'étape N et reçoit toute sa sortie standard
sur son entrée standard. Une étape en échec interrompt le pipeline.

Example:
    Chaînage de deux commandes :

        from commandline_api.commands import Command

        result = Command(["echo", "-n", "Hi!"]).execute() | "base64"
        print(result.stdout)  # "SGkh\\n"
"""

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from commandline_api.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from commandline_api.commands.runner import ProcessOutput, ProcessRunner
from commandline_api.commands.shell import Shell
from commandline_api.errors.exceptions import (
    InvalidCommandError,
    LaunchFailureError,
    NonZeroExitError,
    PipelinePreconditionError,
)
from commandline_api.logging.base import Logger
from commandline_api.prompt import PromptHandler, get_prompt_handler

# Une commande en aval : chaîne découpée sur les blancs, ou arguments
CommandSpec = Union[str, Sequence[str]]


class ExecutorKind(StrEnum):
    """Stratégies d'exécution disponibles."""

    CAPTURE_OUTPUT = "capture_output"
    INTERACTIVE = "interactive"
    DUMMY = "dummy"


@dataclass(frozen=True)
class CommandExecutor:
    """Stratégie d'exécution d'une commande.

    Ensemble fermé de trois variantes, distinguées par kind :

    - CAPTURE_OUTPUT : lance le processus, capture stdout et stderr.
      Adapté aux commandes courtes et non interactives (ls, echo...).
    - INTERACTIVE : relie le processus au terminal courant. Le code
      de sortie est réel, stdout et stderr du résultat sont vides.
    - DUMMY : ne lance rien ; affiche "Executed: <commande>" et
      retourne status, stdout et stderr configurés.

    Les collaborateurs (logger, prompt, formatter) n'entrent pas dans
    la comparaison d'égalité.

    Attributes:
        kind: Variante d'exécution.
        status: Code de sortie retourné par la variante DUMMY.
        stdout: Sortie standard retournée par la variante DUMMY.
        stderr: Sortie d'erreur retournée par la variante DUMMY.
        shell: Lanceur des processus.
        logger: Logger optionnel.
        prompt: Handler d'affichage ; None pour le handler courant.
        formatter: Formateur des lignes affichées sur la console.
    """

    kind: ExecutorKind = ExecutorKind.CAPTURE_OUTPUT
    status: int = 0
    stdout: str = ""
    stderr: str = ""
    shell: Shell = Shell.ENV
    logger: Optional[Logger] = field(
        default=None, compare=False, repr=False
    )
    prompt: Optional[PromptHandler] = field(
        default=None, compare=False, repr=False
    )
    formatter: CommandFormatter = field(
        default_factory=PlainCommandFormatter, compare=False, repr=False
    )

    @classmethod
    def default(cls, **collaborators: Any) -> "CommandExecutor":
        """Exécuteur par défaut : capture des sorties."""
        return cls(kind=ExecutorKind.CAPTURE_OUTPUT, **collaborators)

    @classmethod
    def capture_output(cls, **collaborators: Any) -> "CommandExecutor":
        """Alias explicite de default()."""
        return cls.default(**collaborators)

    @classmethod
    def interactive(cls, **collaborators: Any) -> "CommandExecutor":
        """Exécuteur relié au terminal courant."""
        return cls(kind=ExecutorKind.INTERACTIVE, **collaborators)

    @classmethod
    def dummy(
        cls,
        status: int = 0,
        stdout: str = "",
        stderr: str = "",
        **collaborators: Any
    ) -> "CommandExecutor":
        """Exécuteur factice pour les tests et les simulations.

        Args:
            status: Code de sortie à retourner.
            stdout: Sortie standard à retourner.
            stderr: Sortie d'erreur à retourner.
            **collaborators: shell, logger, prompt ou formatter.
        """
        return cls(
            kind=ExecutorKind.DUMMY,
            status=status,
            stdout=stdout,
            stderr=stderr,
            **collaborators,
        )

    @property
    def prompt_handler(self) -> PromptHandler:
        """Handler d'affichage effectif."""
        return self.prompt or get_prompt_handler()

    def execute(self, command: "Command") -> "CommandRunResult":
        """Exécute la commande selon la variante.

        Args:
            command: Commande à exécuter.

        Returns:
            Le résultat de l'exécution.
        """
        if self.kind is ExecutorKind.CAPTURE_OUTPUT:
            output = self._runner().run_captured(command)
        elif self.kind is ExecutorKind.INTERACTIVE:
            output = self._runner().run_interactive(command)
            if not output.launched:
                self.prompt_handler.print_error(
                    output.stderr.decode("utf-8", errors="replace")
                )
            output = ProcessOutput(
                exit_code=output.exit_code, launched=output.launched
            )
        elif self.kind is ExecutorKind.DUMMY:
            output = self._simulate(command)
        else:
            raise ValueError(f"Exécuteur inconnu : {self.kind}")

        return CommandRunResult(
            command=command,
            exit_code=output.exit_code,
            stdout_data=output.stdout,
            stderr_data=output.stderr,
            launched=output.launched,
        )

    def _runner(self) -> ProcessRunner:
        return ProcessRunner(self.shell, logger=self.logger)

    def _simulate(self, command: "Command") -> ProcessOutput:
        """Simule l'exécution sans lancer de processus.

        L'entrée éventuelle de la commande est ignorée.
        """
        self.prompt_handler.print(
            self.formatter.format_dummy(command.arguments) + "\n"
        )
        if self.logger:
            self.logger.log_info(
                f"[dummy] {command} -> {self.status}"
            )
        return ProcessOutput(
            exit_code=self.status,
            stdout=self.stdout.encode("utf-8"),
            stderr=self.stderr.encode("utf-8"),
        )


@dataclass(frozen=True)
class Command:
    """Commande externe à exécuter.

    Décrit l'intention uniquement : le programme et ses arguments,
    l'exécuteur, le répertoire de travail et l'environnement.

    Attributes:
        arguments: Programme suivi de ses arguments.
        executor: Stratégie d'exécution.
        working_directory: Répertoire de travail (rendu absolu).
        environment: None pour hériter de l'environnement courant ;
            sinon, l'environnement exact du processus (même vide).
        input_source: Sortie de l'étape précédente d'un pipeline,
            transmise sur l'entrée standard.

    Example:
        >>> Command(["echo", "-n", "Hi!"]).execute().stdout
        'Hi!'
    """

    arguments: Tuple[str, ...]
    executor: CommandExecutor = field(
        default_factory=CommandExecutor.default
    )
    working_directory: Path = field(default_factory=Path.cwd)
    environment: Optional[Dict[str, str]] = None
    input_source: Optional[bytes] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Normalise et valide les champs.

        Raises:
            InvalidCommandError: Si aucun programme n'est fourni.
        """
        if isinstance(self.arguments, str):
            raise InvalidCommandError(
                "Les arguments doivent être une séquence, "
                "utilisez split_command() pour une chaîne."
            )
        arguments = tuple(self.arguments)
        if not arguments or not arguments[0].strip():
            raise InvalidCommandError("Aucun programme à exécuter.")
        object.__setattr__(self, "arguments", arguments)
        object.__setattr__(
            self,
            "working_directory",
            Path(self.working_directory).absolute(),
        )
        if self.environment is not None:
            object.__setattr__(
                self, "environment", dict(self.environment)
            )

    @classmethod
    def from_pipe(
        cls,
        arguments: Sequence[str],
        previous: "CommandRunResult",
    ) -> "Command":
        """Crée l'étape suivante d'un pipeline.

        L'exécuteur, le répertoire de travail et l'environnement sont
        repris de la commande précédente ; sa sortie standard devient
        l'entrée de la nouvelle commande.

        Args:
            arguments: Arguments de la nouvelle commande.
            previous: Résultat de l'étape précédente.

        Returns:
            La nouvelle commande, non exécutée.
        """
        upstream = previous.command
        return cls(
            arguments,
            executor=upstream.executor,
            working_directory=upstream.working_directory,
            environment=upstream.environment,
            input_source=previous.stdout_data,
        )

    @property
    def description(self) -> str:
        """Arguments joints par un espace."""
        return " ".join(self.arguments)

    def __str__(self) -> str:
        return self.description

    def execute(self) -> "CommandRunResult":
        """Exécute la commande avec son exécuteur.

        Une commande décrit une exécution unique : l'appeler plusieurs
        fois relance le programme.
        """
        return self.executor.execute(self)


@dataclass(frozen=True)
class CommandRunResult:
    """Résultat de l'exécution d'une commande.

    Attributes:
        command: Commande exécutée.
        exit_code: Code de sortie du processus.
        stdout_data: Sortie standard brute (vide en interactif).
        stderr_data: Sortie d'erreur brute (vide en interactif).
        launched: False si le processus n'a pas pu être lancé.
    """

    command: Command
    exit_code: int
    stdout_data: bytes = field(default=b"", repr=False)
    stderr_data: bytes = field(default=b"", repr=False)
    launched: bool = True

    @property
    def stdout(self) -> str:
        """Sortie standard décodée en UTF-8."""
        return self.stdout_data.decode("utf-8", errors="replace")

    @property
    def stderr(self) -> str:
        """Sortie d'erreur décodée en UTF-8."""
        return self.stderr_data.decode("utf-8", errors="replace")

    @property
    def is_success(self) -> bool:
        """True si le code de sortie vaut 0."""
        return self.exit_code == 0

    def pipe(self, command: CommandSpec, *args: str) -> "CommandRunResult":
        """Chaîne la sortie de ce résultat vers une nouvelle commande.

        La nouvelle commande reprend l'exécuteur, le répertoire de
        travail et l'environnement de la commande de ce résultat.

        Args:
            command: Chaîne découpée sur les blancs (ex: "base64 -d")
                ou séquence d'arguments utilisée telle quelle.
            *args: Arguments supplémentaires, non découpés.

        Returns:
            Le résultat de la nouvelle commande, ou ce résultat
            inchangé si sa commande a échoué.

        Raises:
            PipelinePreconditionError: Si ce résultat provient d'un
                exécuteur interactif ou si la commande est vide.
        """
        if self.command.executor.kind is ExecutorKind.INTERACTIVE:
            raise PipelinePreconditionError(
                f"Le résultat de '{self.command}' provient d'un "
                "exécuteur interactif et ne peut pas être chaîné."
            )

        if isinstance(command, str):
            arguments = command.split() + list(args)
        else:
            arguments = list(command) + list(args)
        if not arguments:
            raise PipelinePreconditionError(
                f"Commande vide après '{self.command}'."
            )

        if not self.is_success:
            executor = self.command.executor
            executor.prompt_handler.print_error(
                executor.formatter.format_pipe_failure(
                    self.command.arguments, self.exit_code
                ) + "\n"
            )
            if executor.logger:
                executor.logger.log_warning(
                    f"Pipeline interrompu après '{self.command}' "
                    f"(code {self.exit_code}) : "
                    f"'{' '.join(arguments)}' non exécutée"
                )
            return self

        return Command.from_pipe(arguments, self).execute()

    def __or__(self, other: CommandSpec) -> "CommandRunResult":
        if not isinstance(other, (str, list, tuple)):
            return NotImplemented
        return self.pipe(other)

    def check(self) -> "CommandRunResult":
        """Lève une exception si la commande a échoué.

        Returns:
            Ce résultat, si le code de sortie vaut 0.

        Raises:
            LaunchFailureError: Si le processus n'a pas pu démarrer.
            NonZeroExitError: Si le code de sortie est non nul.
        """
        if not self.launched:
            raise LaunchFailureError(
                self.command, self.exit_code, self.stderr.strip()
            )
        if not self.is_success:
            raise NonZeroExitError(
                self.command, self.exit_code, self.stdout, self.stderr
            )
        return self

