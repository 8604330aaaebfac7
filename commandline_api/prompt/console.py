"""Implémentation console du PromptHandler."""

import sys

from commandline_api.prompt.base import PromptHandler


class ConsolePromptHandler(PromptHandler):
    """Écrit sur sys.stdout / sys.stderr et lit sur sys.stdin."""

    def print(self, text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    def print_error(self, text: str) -> None:
        sys.stderr.write(text)
        sys.stderr.flush()

    def read(self) -> str:
        try:
            return input()
        except EOFError:
            return ""
