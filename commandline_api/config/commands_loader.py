"""Chargeur de la section [commands] d'un fichier de configuration."""

from pydantic import ValidationError as PydanticValidationError

from commandline_api.config.loader import ConfigFileLoader
from commandline_api.config.models import CommandsConfig
from commandline_api.errors.exceptions import FileConfigurationError


class CommandsConfigLoader(ConfigFileLoader[CommandsConfig]):
    """Charge CommandsConfig depuis un fichier TOML ou JSON.

    Une section absente donne la configuration par défaut ; une
    section invalide lève FileConfigurationError.
    """

    DEFAULT_SECTION = "commands"

    def load(self, section: str | None = None) -> CommandsConfig:
        """Charge la configuration des commandes.

        Args:
            section: Nom de la section (défaut: "commands").

        Returns:
            Configuration validée.

        Raises:
            KeyError: Si la section demandée explicitement est absente.
            FileConfigurationError: Si la section est invalide.
        """
        if section is None:
            name = self.DEFAULT_SECTION
            data = self.config.get(name, {})
        else:
            name = section
            data = self._get_section(section)
        try:
            return CommandsConfig.model_validate(data)
        except PydanticValidationError as e:
            raise FileConfigurationError(
                f"Section [{name}] invalide : {e}"
            ) from e
