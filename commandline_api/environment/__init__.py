"""Module d'accès aux variables d'environnement."""

from commandline_api.environment.base import Environment
from commandline_api.environment.process import (
    InMemoryEnvironment,
    ProcessEnvironment,
)

# Environnement du processus courant
env = ProcessEnvironment()

__all__ = [
    "Environment",
    "ProcessEnvironment",
    "InMemoryEnvironment",
    "env",
]
