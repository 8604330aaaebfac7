"""Interface abstraite pour l'affichage et la saisie en ligne de commande."""

from abc import ABC, abstractmethod


class PromptHandler(ABC):
    """
    Interface pour l'affichage sur la console et la lecture de saisies.

    Permet l'injection de dépendance : les tests substituent une
    implémentation qui enregistre les messages au lieu de les afficher.
    """

    @abstractmethod
    def print(self, text: str) -> None:
        """
        Affiche un texte sur la sortie standard.

        Args:
            text: Texte à afficher. Aucun saut de ligne n'est ajouté.
        """
        pass

    @abstractmethod
    def print_error(self, text: str) -> None:
        """
        Affiche un texte sur la sortie d'erreur.

        Args:
            text: Texte à afficher. Aucun saut de ligne n'est ajouté.
        """
        pass

    @abstractmethod
    def read(self) -> str:
        """
        Lit une ligne sur l'entrée standard.

        Returns:
            La ligne lue sans son saut de ligne final, ou une chaîne
            vide si l'entrée ne peut pas être lue.
        """
        pass
