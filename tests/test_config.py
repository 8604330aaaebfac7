"""Tests pour le module config."""

import json
from unittest.mock import MagicMock

import pytest
from pydantic import BaseModel, ValidationError

from commandline_api.commands import (
    AnsiCommandFormatter,
    ExecutorKind,
    PlainCommandFormatter,
    Shell,
    executor_from_config,
)
from commandline_api.config import (
    CommandsConfig,
    CommandsConfigLoader,
    ConfigLoader,
    FileConfigLoader,
)
from commandline_api.errors import FileConfigurationError
from commandline_api.logging import FileLogger


class SampleConfig(BaseModel):
    """Modèle Pydantic de test."""
    name: str
    count: int

    model_config = {"extra": "forbid"}


class TestLoadConfig:
    """Tests pour FileConfigLoader.load."""

    def setup_method(self):
        """Initialise le loader avant chaque test."""
        self.loader = FileConfigLoader()

    def test_load_json(self, tmp_path):
        """Test du chargement d'un fichier JSON."""
        config_file = tmp_path / "config.json"
        config_data = {"key": "value", "nested": {"a": 1}}
        config_file.write_text(json.dumps(config_data))

        result = self.loader.load(config_file)

        assert result == config_data

    def test_load_toml(self, tmp_path):
        """Test du chargement d'un fichier TOML."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('[section]\nkey = "value"\n')

        result = self.loader.load(config_file)

        assert result["section"]["key"] == "value"

    def test_file_not_found(self):
        """Test avec fichier inexistant."""
        with pytest.raises(FileNotFoundError):
            self.loader.load("/nonexistent/config.toml")

    def test_unsupported_extension(self, tmp_path):
        """Test avec extension non supportée."""
        config_file = tmp_path / "config.xml"
        config_file.write_text("<config></config>")

        with pytest.raises(ValueError, match="Extension non supportée"):
            self.loader.load(config_file)


class TestLoadConfigWithSchema:
    """Tests FileConfigLoader.load() avec schema Pydantic."""

    def setup_method(self):
        self.loader = FileConfigLoader()

    def test_schema_retourne_une_instance(self, tmp_path):
        """Avec schema, load() retourne une instance du modèle."""
        config_file = tmp_path / "config.json"
        config_file.write_text('{"name": "test", "count": 42}')

        result = self.loader.load(config_file, schema=SampleConfig)

        assert isinstance(result, SampleConfig)
        assert result.count == 42

    def test_donnees_invalides(self, tmp_path):
        """Des données invalides lèvent pydantic.ValidationError."""
        config_file = tmp_path / "config.json"
        config_file.write_text('{"name": "test", "count": "abc"}')

        with pytest.raises(ValidationError):
            self.loader.load(config_file, schema=SampleConfig)

    def test_schema_non_pydantic(self, tmp_path):
        """Un schema qui n'est pas un BaseModel lève TypeError."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{}")

        with pytest.raises(TypeError, match="BaseModel"):
            self.loader.load(config_file, schema=dict)


class TestCommandsConfig:
    """Tests pour le modèle CommandsConfig."""

    def test_valeurs_par_defaut(self):
        """Test de la configuration par défaut."""
        config = CommandsConfig()
        assert config.shell == "env"
        assert config.colored_output is False
        assert config.log_file is None
        assert config.log_level == "INFO"

    def test_niveau_normalise(self):
        """Test que le niveau de log est mis en majuscules."""
        assert CommandsConfig(log_level="debug").log_level == "DEBUG"

    def test_shell_inconnu(self):
        """Test qu'un lanceur inconnu est refusé."""
        with pytest.raises(ValidationError):
            CommandsConfig(shell="fish")

    def test_champ_inconnu(self):
        """Test qu'une clé inconnue est refusée."""
        with pytest.raises(ValidationError):
            CommandsConfig(timeout=10)

    def test_log_file_vide(self):
        """Test qu'un chemin de log vide est refusé."""
        with pytest.raises(ValidationError, match="log_file"):
            CommandsConfig(log_file="  ")

    def test_immuable(self):
        """Test que la configuration est figée."""
        config = CommandsConfig()
        with pytest.raises(ValidationError):
            config.shell = "bash"


class TestCommandsConfigLoader:
    """Tests pour CommandsConfigLoader."""

    def test_section_par_defaut(self, tmp_path):
        """Test du chargement de la section [commands]."""
        config_file = tmp_path / "config.toml"
        config_file.write_text(
            '[commands]\nshell = "bash"\ncolored_output = true\n'
        )

        config = CommandsConfigLoader(config_file).load()

        assert config.shell == "bash"
        assert config.colored_output is True

    def test_section_absente_donne_les_defauts(self, tmp_path):
        """Test qu'un fichier sans [commands] donne la configuration par défaut."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('[other]\nkey = 1\n')

        assert CommandsConfigLoader(config_file).load() == CommandsConfig()

    def test_section_explicite(self, tmp_path):
        """Test d'une section nommée explicitement."""
        config_file = tmp_path / "config.json"
        config_file.write_text('{"deploy": {"shell": "sh"}}')

        config = CommandsConfigLoader(config_file).load("deploy")

        assert config.shell == "sh"

    def test_section_explicite_absente(self, tmp_path):
        """Test qu'une section explicite absente lève KeyError."""
        config_file = tmp_path / "config.json"
        config_file.write_text('{"commands": {}}')

        with pytest.raises(KeyError, match="non trouvée"):
            CommandsConfigLoader(config_file).load("deploy")

    def test_section_invalide(self, tmp_path):
        """Test qu'une section invalide lève FileConfigurationError."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('[commands]\nshell = "fish"\n')

        with pytest.raises(FileConfigurationError, match=r"\[commands\]"):
            CommandsConfigLoader(config_file).load()

    def test_loader_injecte(self):
        """Test de l'injection d'un ConfigLoader."""
        mock_loader = MagicMock(spec=ConfigLoader)
        mock_loader.load.return_value = {"commands": {"shell": "zsh"}}

        config = CommandsConfigLoader(
            "config.toml", config_loader=mock_loader
        ).load()

        mock_loader.load.assert_called_once_with("config.toml")
        assert config.shell == "zsh"


class TestExecutorFromConfig:
    """Tests pour executor_from_config."""

    def test_configuration_par_defaut(self):
        """Test de l'exécuteur issu de la configuration par défaut."""
        executor = executor_from_config(CommandsConfig())
        assert executor.kind is ExecutorKind.CAPTURE_OUTPUT
        assert executor.shell is Shell.ENV
        assert executor.logger is None
        assert isinstance(executor.formatter, PlainCommandFormatter)

    def test_shell_et_couleurs(self):
        """Test du lanceur et du formateur configurés."""
        executor = executor_from_config(
            CommandsConfig(shell="bash", colored_output=True),
            kind=ExecutorKind.INTERACTIVE,
        )
        assert executor.kind is ExecutorKind.INTERACTIVE
        assert executor.shell is Shell.BASH
        assert isinstance(executor.formatter, AnsiCommandFormatter)

    def test_log_file_cree_un_file_logger(self, tmp_path):
        """Test de la création d'un FileLogger depuis log_file."""
        log_file = tmp_path / "commands.log"
        executor = executor_from_config(
            CommandsConfig(log_file=str(log_file))
        )
        assert isinstance(executor.logger, FileLogger)
        executor.logger.close()

    def test_logger_fourni_prioritaire(self, tmp_path):
        """Test qu'un logger fourni remplace log_file."""
        logger = MagicMock()
        executor = executor_from_config(
            CommandsConfig(log_file=str(tmp_path / "x.log")), logger=logger
        )
        assert executor.logger is logger
        assert not (tmp_path / "x.log").exists()

    def test_dummy_refuse(self):
        """Test que la variante factice n'est pas créée par configuration."""
        with pytest.raises(ValueError):
            executor_from_config(CommandsConfig(), kind=ExecutorKind.DUMMY)
