"""Formateurs des messages émis autour de l'exécution des commandes.

Ce module fournit une hiérarchie de formateurs permettant d'afficher
les messages différemment selon le contexte (fichier de log ou console)
et les privilèges d'exécution (root ou utilisateur).

Classes :
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Texte brut avec préfixes [ROOT]/[user].
    AnsiCommandFormatter : Codes ANSI colorés pour la console.

Note :
    La ligne de l'exécuteur factice ("Executed: <commande>") et le
    diagnostic de pipeline interrompu gardent le même texte quel que
    soit le formateur. La ligne factice n'est jamais colorée ; le
    diagnostic ne l'est que si stderr est un terminal (TTY).
"""

import sys
from abc import ABC, abstractmethod
from typing import Sequence


class CommandFormatter(ABC):
    """Interface abstraite pour formater les messages de commande.

    Les formateurs reçoivent la commande sous forme de séquence
    d'arguments et, pour les messages de log, le contexte
    d'exécution (is_root).
    """

    @abstractmethod
    def format_start(
        self, command: Sequence[str], is_root: bool
    ) -> str:
        """Formate le message de début d'exécution.

        Args:
            command: Arguments de la commande.
            is_root: True si la commande est exécutée en root.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_start_interactive(
        self, command: Sequence[str], is_root: bool
    ) -> str:
        """Formate le début d'une exécution interactive.

        Args:
            command: Arguments de la commande.
            is_root: True si la commande est exécutée en root.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_dummy(self, command: Sequence[str]) -> str:
        """Formate la ligne émise par l'exécuteur factice.

        Args:
            command: Arguments de la commande simulée.

        Returns:
            Ligne "Executed: <arguments joints par un espace>".
        """
        pass

    @abstractmethod
    def format_pipe_failure(
        self, command: Sequence[str], exit_code: int
    ) -> str:
        """Formate le diagnostic d'un pipeline interrompu.

        Args:
            command: Arguments de la commande en échec.
            exit_code: Code de sortie de la commande en échec.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_exit(
        self, command: Sequence[str], exit_code: int
    ) -> str:
        """Formate le message d'une commande terminée en échec.

        Args:
            command: Arguments de la commande.
            exit_code: Code de sortie non nul.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass


def _join(command: Sequence[str]) -> str:
    return " ".join(command)


class PlainCommandFormatter(CommandFormatter):
    """Formateur texte brut pour les logs fichier et les tests.

    Produit des messages avec préfixe textuel [ROOT] ou [user].
    N'utilise aucun code ANSI.

    Example :
        [user] Exécution : rsync -av /src /dst
        Executed: rsync -av /src /dst
    """

    _ROOT_PREFIX = "[ROOT]"
    _USER_PREFIX = "[user]"

    def _prefix(self, is_root: bool) -> str:
        return self._ROOT_PREFIX if is_root else self._USER_PREFIX

    def format_start(
        self, command: Sequence[str], is_root: bool
    ) -> str:
        """Formate le début d'exécution avec préfixe textuel."""
        return f"{self._prefix(is_root)} Exécution : {_join(command)}"

    def format_start_interactive(
        self, command: Sequence[str], is_root: bool
    ) -> str:
        """Formate le début d'exécution interactive avec préfixe."""
        return (
            f"{self._prefix(is_root)} "
            f"Exécution (interactive) : {_join(command)}"
        )

    def format_dummy(self, command: Sequence[str]) -> str:
        return f"Executed: {_join(command)}"

    def format_pipe_failure(
        self, command: Sequence[str], exit_code: int
    ) -> str:
        return (
            f"Cannot pipe to command '{_join(command)}' "
            f"because previous command ends with status {exit_code}."
        )

    def format_exit(
        self, command: Sequence[str], exit_code: int
    ) -> str:
        return f"Code retour {exit_code} : {_join(command)}"


class AnsiCommandFormatter(PlainCommandFormatter):
    """Formateur ANSI coloré pour la sortie console.

    Distingue visuellement les exécutions root (jaune-or gras) des
    exécutions utilisateur (vert) et les échecs (rouge). N'émet aucun
    code ANSI si le flux de destination n'est pas un terminal TTY :
    stdout pour les lignes de lancement, stderr pour le diagnostic de
    pipeline interrompu. La ligne factice reste toujours en texte brut.

    Styles ANSI :
        ROOT    → \\033[1;33m (jaune-or gras)
        user    → \\033[0;32m (vert normal)
        échec   → \\033[1;31m (rouge gras)
        reset   → \\033[0m
    """

    RESET = "\033[0m"
    ROOT_STYLE = "\033[1;33m"
    USER_STYLE = "\033[0;32m"
    ERROR_STYLE = "\033[1;31m"

    def _is_tty(self, stream=None) -> bool:
        """Vérifie si le flux (stdout par défaut) est un terminal TTY."""
        if stream is None:
            stream = sys.stdout
        return hasattr(stream, "isatty") and stream.isatty()

    def _style(self, text: str, style: str, stream=None) -> str:
        if not self._is_tty(stream):
            return text
        return f"{style}{text}{self.RESET}"

    def _privilege_style(self, is_root: bool) -> str:
        return self.ROOT_STYLE if is_root else self.USER_STYLE

    def format_start(
        self, command: Sequence[str], is_root: bool
    ) -> str:
        return self._style(
            super().format_start(command, is_root),
            self._privilege_style(is_root),
        )

    def format_start_interactive(
        self, command: Sequence[str], is_root: bool
    ) -> str:
        return self._style(
            super().format_start_interactive(command, is_root),
            self._privilege_style(is_root),
        )

    def format_pipe_failure(
        self, command: Sequence[str], exit_code: int
    ) -> str:
        return self._style(
            super().format_pipe_failure(command, exit_code),
            self.ERROR_STYLE,
            sys.stderr,
        )

    def format_exit(
        self, command: Sequence[str], exit_code: int
    ) -> str:
        return self._style(
            super().format_exit(command, exit_code), self.ERROR_STYLE
        )
