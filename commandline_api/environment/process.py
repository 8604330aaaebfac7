"""Implémentations concrètes de la source d'environnement."""

import os
from typing import Dict, List, Mapping, Optional

from commandline_api.environment.base import Environment


class ProcessEnvironment(Environment):
    """Environnement du processus courant (os.environ)."""

    def keys(self) -> List[str]:
        return list(os.environ.keys())

    def get(self, key: str) -> Optional[str]:
        return os.environ.get(key)

    def set(self, key: str, value: Optional[str]) -> None:
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value


class InMemoryEnvironment(Environment):
    """Environnement isolé en mémoire, utile pour les tests."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self._variables: Dict[str, str] = dict(initial or {})

    def keys(self) -> List[str]:
        return list(self._variables.keys())

    def get(self, key: str) -> Optional[str]:
        return self._variables.get(key)

    def set(self, key: str, value: Optional[str]) -> None:
        if value is None:
            self._variables.pop(key, None)
        else:
            self._variables[key] = value
