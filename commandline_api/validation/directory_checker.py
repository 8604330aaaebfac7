"""Validateur du répertoire de travail d'une commande."""

from pathlib import Path
from typing import Union

from commandline_api.validation.base import Validator


class WorkingDirectoryChecker(Validator):
    """Vérifie qu'un répertoire de travail existe et est un répertoire.

    Lève des exceptions standard (ValueError) pour rester générique.
    Le runner les convertit en échec de lancement.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        """Initialise le validateur.

        Args:
            path: Répertoire de travail à valider.
        """
        self.path = Path(path)

    def validate(self) -> None:
        """Valide le répertoire de travail.

        Raises:
            ValueError: Si le chemin n'existe pas ou n'est pas
                un répertoire.
        """
        if not self.path.exists():
            raise ValueError(
                f"Le répertoire {self.path} n'existe pas."
            )

        if not self.path.is_dir():
            raise ValueError(
                f"Le chemin {self.path} n'est pas un répertoire."
            )
