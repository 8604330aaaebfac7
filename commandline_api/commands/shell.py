"""Lanceurs utilisés pour démarrer les processus.

Par défaut, les programmes sont résolus via le PATH par /usr/bin/env,
ce qui permet d'appeler des noms nus (ls, echo, bash...). Un programme
introuvable se traduit alors par le code 127 et un message sur stderr,
jamais par une exception.

Les shells (sh, bash, zsh) reçoivent la commande jointe par des espaces
via l'option -c : les métacaractères (|, >, quotes...) sont alors
interprétés par le shell.
"""

from enum import StrEnum
from typing import Dict, List, Sequence, Tuple

# Code de sortie conventionnel « commande introuvable »
COMMAND_NOT_FOUND = 127
# Code de sortie conventionnel « commande non exécutable »
COMMAND_NOT_EXECUTABLE = 126

PIPE_CHARACTER = "|"


class Shell(StrEnum):
    """Lanceur de processus."""

    ENV = "env"
    SH = "sh"
    BASH = "bash"
    ZSH = "zsh"

    @property
    def launcher(self) -> Tuple[str, ...]:
        """Retourne le préfixe de la ligne de commande du lanceur."""
        return _LAUNCHERS[self]

    @property
    def interprets_syntax(self) -> bool:
        """True si le lanceur interprète la syntaxe shell."""
        return self is not Shell.ENV

    def build_argv(self, arguments: Sequence[str]) -> List[str]:
        """Construit la ligne de commande réellement lancée.

        Args:
            arguments: Programme suivi de ses arguments.

        Returns:
            Liste prête pour subprocess.

        Example:
            >>> Shell.ENV.build_argv(["ls", "-l"])
            ['/usr/bin/env', 'ls', '-l']
            >>> Shell.BASH.build_argv(["ls", "|", "wc"])
            ['/bin/bash', '-c', 'ls | wc']
        """
        if self.interprets_syntax:
            return [*self.launcher, " ".join(arguments)]
        return [*self.launcher, *arguments]


_LAUNCHERS: Dict[Shell, Tuple[str, ...]] = {
    Shell.ENV: ("/usr/bin/env",),
    Shell.SH: ("/bin/sh", "-c"),
    Shell.BASH: ("/bin/bash", "-c"),
    Shell.ZSH: ("/bin/zsh", "-c"),
}


def resolve_shell(shell: Shell, arguments: Sequence[str]) -> Shell:
    """Choisit le lanceur effectif d'une commande.

    Une commande composée d'une seule chaîne contenant un pipe
    (ex: "ls | grep a") n'a de sens qu'interprétée par un shell :
    avec le lanceur ENV, elle est confiée à sh. Dans tous les autres
    cas, le lanceur demandé est conservé et les métacaractères restent
    des arguments littéraux pour ENV.

    Args:
        shell: Lanceur configuré sur l'exécuteur.
        arguments: Arguments de la commande.

    Returns:
        Le lanceur à utiliser.
    """
    if (
        shell is Shell.ENV
        and len(arguments) == 1
        and PIPE_CHARACTER in arguments[0]
    ):
        return Shell.SH
    return shell
