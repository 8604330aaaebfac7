"""Module d'affichage et de saisie en ligne de commande.

Le handler courant est partagé par tout le processus. Il est utilisé
par l'exécuteur factice et par les diagnostics de pipeline lorsque
l'exécuteur ne fournit pas son propre handler.
"""

from commandline_api.prompt.base import PromptHandler
from commandline_api.prompt.console import ConsolePromptHandler

_current_handler: PromptHandler = ConsolePromptHandler()


def get_prompt_handler() -> PromptHandler:
    """Retourne le handler courant du processus."""
    return _current_handler


def set_prompt_handler(handler: PromptHandler) -> PromptHandler:
    """Remplace le handler courant.

    Args:
        handler: Nouveau handler à utiliser.

    Returns:
        Le handler précédent, pour pouvoir le restaurer.
    """
    global _current_handler
    previous = _current_handler
    _current_handler = handler
    return previous


def println(text: str) -> None:
    """Affiche une ligne sur la sortie standard du handler courant."""
    _current_handler.print(text + "\n")


def println_error(text: str) -> None:
    """Affiche une ligne sur la sortie d'erreur du handler courant."""
    _current_handler.print_error(text + "\n")


__all__ = [
    "PromptHandler",
    "ConsolePromptHandler",
    "get_prompt_handler",
    "set_prompt_handler",
    "println",
    "println_error",
]
