"""
    LoggerErrorHandler
"""
from commandline_api.errors.base import ErrorHandler
from commandline_api.errors.exceptions import (ApplicationError,
                                               NonZeroExitError)
from commandline_api.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour logger les erreurs.

    Enregistre les erreurs via le Logger injecté au constructeur.
    """

    def __init__(self,
                 logger: Logger,
                 base_error_type: type[Exception] = ApplicationError
                 ) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
            base_error_type: Classe de base des erreurs connues.
        """
        self.logger = logger
        self.base_error_type = base_error_type

    def handle(self, error: Exception) -> None:
        """Log l'erreur, avec le stderr de la commande si disponible."""
        if isinstance(error, self.base_error_type):
            self.logger.log_error(f"{type(error).__name__}: {error}")
            if isinstance(error, NonZeroExitError) and error.stderr:
                self.logger.log_error(
                    f"stderr : {error.stderr.rstrip()}"
                )
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {error}"
            )
