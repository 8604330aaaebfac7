"""Modèle Pydantic de la configuration d'exécution des commandes.

Exemple de fichier TOML :

    [commands]
    shell = "bash"
    colored_output = true
    log_file = "/var/log/myscript/commands.log"
    log_level = "INFO"
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from commandline_api.logging.file_logger import DEFAULT_LOG_FORMAT

ShellName = Literal["env", "sh", "bash", "zsh"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class CommandsConfig(BaseModel):
    """Configuration des exécuteurs de commandes.

    Attributes:
        shell: Lanceur des processus (env résout les programmes via
            le PATH sans interpréter la syntaxe shell).
        colored_output: Colorer les lignes console (TTY uniquement).
        log_file: Fichier de log des exécutions, ou None.
        log_level: Niveau minimal des messages de log.
        log_format: Format des messages de log.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    shell: ShellName = "env"
    colored_output: bool = False
    log_file: Optional[str] = None
    log_level: LogLevel = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator("log_file")
    @classmethod
    def log_file_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("log_file ne peut pas être vide")
        return value
