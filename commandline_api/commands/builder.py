"""Constructeur fluent de commandes.

Ce module fournit la classe CommandBuilder qui assemble les arguments
d'une commande via une API fluent, puis produit une Command prête à
être exécutée.

Example:
    Construction d'une commande rsync :

        from commandline_api.commands import CommandBuilder

        command = (
            CommandBuilder("rsync")
            .with_options(["-av", "--delete"])
            .with_option("--compress-level", "3")
            .with_flag("--stats")
            .with_args(["/src/", "/dest/"])
            .in_directory("/srv")
            .build()
        )
        # command.arguments : ("rsync", "-av", "--delete",
        #                      "--compress-level=3", "--stats",
        #                      "/src/", "/dest/")
        result = command.execute()
"""

from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from commandline_api.commands.base import Command, CommandExecutor
from commandline_api.errors.exceptions import InvalidCommandError


class CommandBuilder:
    """Constructeur fluent pour assembler des commandes."""

    def __init__(self, program: str) -> None:
        """Initialise le constructeur avec le programme.

        Args:
            program: Nom ou chemin du programme à exécuter.

        Raises:
            InvalidCommandError: Si program est vide.
        """
        if not program or not program.strip():
            raise InvalidCommandError("Le programme est requis.")
        self._program: str = program
        self._options: List[str] = []
        self._args: List[str] = []
        self._working_directory: Optional[Path] = None
        self._environment: Optional[Dict[str, str]] = None
        self._executor: Optional[CommandExecutor] = None

    def with_options(self, options: List[str]) -> "CommandBuilder":
        """Ajoute une liste d'options (ex: ['-av', '--delete'])."""
        self._options.extend(options)
        return self

    def with_flag(self, flag: str) -> "CommandBuilder":
        """Ajoute un flag simple (ex: '--stats')."""
        self._options.append(flag)
        return self

    def with_option(self, key: str, value: str) -> "CommandBuilder":
        """Ajoute une option au format 'clé=valeur'.

        Args:
            key: Clé de l'option (ex: '--compression').
            value: Valeur de l'option (ex: 'lz4').

        Returns:
            L'instance courante pour le chaînage.
        """
        self._options.append(f"{key}={value}")
        return self

    def with_option_if(
        self,
        key: str,
        value: Optional[str],
        condition: bool = True,
    ) -> "CommandBuilder":
        """Ajoute une option seulement si la condition est vraie.

        L'option est ignorée si condition est False ou si
        value est None.
        """
        if condition and value is not None:
            self._options.append(f"{key}={value}")
        return self

    def with_args(self, args: List[str]) -> "CommandBuilder":
        """Ajoute les arguments positionnels finaux."""
        self._args.extend(args)
        return self

    def in_directory(self, path: Union[str, Path]) -> "CommandBuilder":
        """Définit le répertoire de travail de la commande."""
        self._working_directory = Path(path)
        return self

    def with_environment(
        self, environment: Mapping[str, str]
    ) -> "CommandBuilder":
        """Définit l'environnement exact de la commande.

        L'environnement remplace celui du processus courant ; utiliser
        Environment.extended() pour partir de l'environnement courant.

        Args:
            environment: Variables d'environnement.

        Returns:
            L'instance courante pour le chaînage.
        """
        self._environment = dict(environment)
        return self

    def using(self, executor: CommandExecutor) -> "CommandBuilder":
        """Définit l'exécuteur de la commande."""
        self._executor = executor
        return self

    def build_arguments(self) -> List[str]:
        """Retourne les arguments de la commande sous forme de liste."""
        return [self._program] + self._options + self._args

    def build(self) -> Command:
        """Construit la commande.

        Returns:
            Command non exécutée, avec les valeurs par défaut pour
            les réglages non définis.
        """
        return Command(
            self.build_arguments(),
            executor=self._executor or CommandExecutor.default(),
            working_directory=self._working_directory or Path.cwd(),
            environment=self._environment,
        )
