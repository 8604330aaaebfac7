"""Découpage naïf des chaînes de commande et protection des arguments."""

import shlex
from typing import List, Sequence

from commandline_api.errors.exceptions import InvalidCommandError


def split_command(command: str, args: Sequence[str] = ()) -> List[str]:
    """Découpe une chaîne de commande sur les blancs.

    Le découpage est volontairement naïf : aucune interprétation des
    quotes ni des échappements. Les espaces consécutifs sont fusionnés,
    ceux de début et de fin ignorés. Les arguments explicites sont
    ajoutés tels quels, sans découpage.

    Args:
        command: Programme et premiers arguments (ex: "echo -n").
        args: Arguments supplémentaires.

    Returns:
        Liste des arguments de la commande.

    Raises:
        InvalidCommandError: Si aucun programme n'est fourni.

    Example:
        >>> split_command("  echo   -n ", ["Hello World"])
        ['echo', '-n', 'Hello World']
    """
    arguments = command.split() + list(args)
    if not arguments:
        raise InvalidCommandError(
            f"Aucun programme à exécuter dans {command!r}."
        )
    return arguments


def quoted(text: str) -> str:
    """Protège un texte pour un lanceur shell (sh, bash, zsh).

    Le texte reste un seul mot une fois interprété par le shell ;
    un texte sans caractère spécial est retourné tel quel.

    Example:
        >>> quoted("Hello World")
        "'Hello World'"
    """
    return shlex.quote(text)
