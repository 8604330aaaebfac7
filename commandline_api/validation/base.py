"""Interface des vérifications préalables au lancement d'un processus."""

from abc import ABC, abstractmethod


class Validator(ABC):
    """Vérification exécutée par le runner avant subprocess.run.

    Une vérification en échec lève ValueError ; le runner la traduit
    en échec de lancement (code 127) au lieu de la propager.
    """

    @abstractmethod
    def validate(self) -> None:
        """Vérifie la précondition.

        Raises:
            ValueError: Si le processus ne peut pas être lancé.
        """
        pass
