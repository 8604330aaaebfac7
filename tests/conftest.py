"""Fixtures partagées par les tests."""

from typing import List

import pytest

from commandline_api.prompt import PromptHandler, set_prompt_handler


class RecordingPromptHandler(PromptHandler):
    """PromptHandler qui enregistre les affichages au lieu de les écrire.

    Les messages d'erreur sont enregistrés sous la forme "ERR{...}".
    """

    def __init__(self) -> None:
        self.prints: List[str] = []
        self.inputs: List[str] = []

    def prepare(self, *inputs: str) -> None:
        self.inputs = list(inputs)

    def print(self, text: str) -> None:
        self.prints.append(text)

    def print_error(self, text: str) -> None:
        self.prints.append(f"ERR{{{text}}}")

    def read(self) -> str:
        return self.inputs.pop(0) if self.inputs else ""


@pytest.fixture
def prompt():
    """Installe un RecordingPromptHandler pour la durée du test."""
    handler = RecordingPromptHandler()
    previous = set_prompt_handler(handler)
    yield handler
    set_prompt_handler(previous)
