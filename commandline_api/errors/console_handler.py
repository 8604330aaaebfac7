"""
    ConsoleErrorHandler (générique, configurable)
"""
import sys

from commandline_api.errors.base import ErrorHandler
from commandline_api.errors.exceptions import (ApplicationError,
                                               ConfigurationError,
                                               InvalidCommandError,
                                               LaunchFailureError,
                                               NonZeroExitError,
                                               PipelinePreconditionError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs sur la sortie d'erreur.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche une solution adaptée au type d'erreur.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = ApplicationError,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base pour distinguer erreurs
                connues/inconnues (défaut: ApplicationError).
            solutions: Dictionnaire {TypeException: "message solution"},
                prioritaire sur les solutions par défaut.
        """
        self.base_error_type = base_error_type
        self.solutions = solutions or {}

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur avec un message destiné à l'utilisateur."""
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _emit(self, message: str) -> None:
        print(message, file=sys.stderr)

    def _solution_for(self, error: Exception) -> str:
        """Retourne la solution la plus spécifique pour l'erreur.

        Args:
            error: L'exception métier à traiter.

        Returns:
            Texte de la solution proposée.
        """
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution
        if isinstance(error, LaunchFailureError):
            return ("Vérifiez que le programme est installé et que "
                    "le répertoire de travail existe.")
        if isinstance(error, NonZeroExitError):
            return "Consultez la sortie d'erreur de la commande."
        if isinstance(error, (InvalidCommandError,
                              PipelinePreconditionError)):
            return "Corrigez la construction de la commande."
        if isinstance(error, ConfigurationError):
            return "Vérifiez votre fichier de configuration."
        return "Voir les suggestions ci-dessus."

    def _handle_known_error(self, error: Exception) -> None:
        self._emit(f"\n🛑 {type(error).__name__}: {error}")
        if isinstance(error, NonZeroExitError) and error.stderr:
            self._emit(error.stderr.rstrip("\n"))
        self._emit(f"\n🔧 Solution : {self._solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        self._emit(f"\n💥 Erreur inattendue: {error}")
        self._emit(f"Type: {type(error).__name__}")
        self._emit(
            "\n📋 Cela peut être un bug. "
            "Veuillez ouvrir une issue avec ces informations."
        )
