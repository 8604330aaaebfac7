"""Interface abstraite pour le journal des exécutions de commandes."""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Journal des exécutions.

    Reçoit les messages du runner (lancement, code retour, échec de
    lancement) et des pipelines (interruption). Un logger est toujours
    optionnel : aucun composant n'en exige un.
    """

    @abstractmethod
    def log_debug(self, message: str) -> None:
        """Log un détail technique (ligne de commande réelle...)."""
        pass

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Log le lancement d'une commande."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Log un pipeline interrompu."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Log un code retour non nul ou un échec de lancement."""
        pass
