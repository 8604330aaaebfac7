"""Interface abstraite pour l'accès aux variables d'environnement."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class Environment(ABC):
    """
    Source de variables d'environnement.

    Isole l'accès à l'environnement global du processus : les tests
    utilisent InMemoryEnvironment sans modifier os.environ.
    """

    @abstractmethod
    def keys(self) -> List[str]:
        """Retourne les noms de toutes les variables définies."""
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Retourne la valeur d'une variable.

        Args:
            key: Nom de la variable

        Returns:
            La valeur, ou None si la variable n'est pas définie
        """
        pass

    @abstractmethod
    def set(self, key: str, value: Optional[str]) -> None:
        """
        Définit ou supprime une variable.

        Args:
            key: Nom de la variable
            value: Nouvelle valeur, ou None pour supprimer la variable
        """
        pass

    def snapshot(self) -> Dict[str, str]:
        """Retourne une copie de toutes les variables."""
        snapshot: Dict[str, str] = {}
        for key in self.keys():
            value = self.get(key)
            if value is not None:
                snapshot[key] = value
        return snapshot

    def extended(self, **overrides: str) -> Dict[str, str]:
        """
        Retourne une copie de l'environnement complétée par overrides.

        Une commande exécutée avec un environnement remplace entièrement
        celui du processus ; cette méthode permet d'étendre explicitement
        l'environnement courant plutôt que de le remplacer.

        Args:
            **overrides: Variables à ajouter ou remplacer

        Returns:
            Nouveau dictionnaire indépendant de la source
        """
        merged = self.snapshot()
        merged.update(overrides)
        return merged

    def __getitem__(self, key: str) -> Optional[str]:
        return self.get(key)

    def __setitem__(self, key: str, value: Optional[str]) -> None:
        self.set(key, value)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None
