"""Tests d'intégration : exécution de vrais processus."""

import shutil

import pytest

from commandline_api import (
    Command,
    CommandExecutor,
    Shell,
    echo,
    quoted,
    run,
    split_command,
)
from commandline_api.errors import LaunchFailureError, NonZeroExitError


pytestmark = pytest.mark.skipif(
    shutil.which("env") is None or shutil.which("sh") is None,
    reason="env et sh requis",
)

requires_bash = pytest.mark.skipif(
    shutil.which("bash") is None, reason="bash requis"
)


@pytest.fixture
def fruits(tmp_path):
    """Répertoire contenant les fichiers a, b et c."""
    for name in ("a", "b", "c"):
        (tmp_path / name).write_text(name)
    return tmp_path


class TestCaptureOutput:
    """Tests de l'exécuteur par défaut."""

    def test_echo_sans_retour_ligne(self, prompt):
        """Test de echo -n."""
        result = Command(["echo", "-n", "Hello World"]).execute()
        assert result.exit_code == 0
        assert result.stdout == "Hello World"
        assert result.stderr == ""
        assert prompt.prints == []

    def test_echo_avec_retour_ligne(self):
        """Test de echo sans option."""
        assert Command(["echo", "Hello"]).execute().stdout == "Hello\n"

    def test_chaine_decoupee(self):
        """Test d'une commande construite par split_command."""
        result = Command(split_command("echo -n", ["a  b"])).execute()
        assert result.stdout == "a  b"

    def test_fonction_echo(self):
        """Test de la fonction echo()."""
        assert echo("Hello").stdout == "Hello"

    def test_fonction_run(self, fruits):
        """Test de la fonction run() avec répertoire de travail."""
        result = run("ls", working_directory=fruits)
        assert result.stdout.split() == ["a", "b", "c"]

    def test_repertoire_de_travail(self, fruits):
        """Test que le processus s'exécute dans le répertoire donné."""
        result = Command(["pwd"], working_directory=fruits).execute()
        assert result.stdout.strip() == str(fruits.resolve())

    def test_programme_relatif_au_repertoire(self, tmp_path):
        """Test qu'un programme ./x est cherché dans le répertoire donné."""
        script = tmp_path / "hello.sh"
        script.write_text("#!/bin/sh\necho from-script\n")
        script.chmod(0o755)
        result = Command(["./hello.sh"], working_directory=tmp_path).execute()
        assert result.exit_code == 0
        assert result.stdout == "from-script\n"

    def test_code_de_sortie_non_nul(self):
        """Test d'une commande qui échoue."""
        result = Command(["sh", "-c", "echo oops >&2; exit 3"]).execute()
        assert result.exit_code == 3
        assert result.stderr == "oops\n"
        assert not result.is_success
        with pytest.raises(NonZeroExitError):
            result.check()

    def test_programme_introuvable(self):
        """Test du code 127 pour un programme inexistant."""
        result = Command(["cmdNotExist"]).execute()
        assert result.exit_code == 127
        assert result.stderr != ""

    def test_repertoire_inexistant(self, tmp_path):
        """Test d'un répertoire de travail absent."""
        result = Command(
            ["ls"], working_directory=tmp_path / "absent"
        ).execute()
        assert result.launched is False
        assert result.exit_code == 127
        with pytest.raises(LaunchFailureError):
            result.check()


class TestEnvironment:
    """Tests de l'environnement transmis aux processus."""

    def test_environnement_exclusif(self):
        """Test que seules les variables fournies sont visibles."""
        result = Command(["printenv"], environment={"K": "v"}).execute()
        assert result.stdout == "K=v\n"

    def test_environnement_herite(self, monkeypatch):
        """Test qu'une commande sans environnement hérite du parent."""
        monkeypatch.setenv("COMMANDLINE_API_TEST", "present")
        result = Command(["printenv", "COMMANDLINE_API_TEST"]).execute()
        assert result.stdout == "present\n"

    def test_variable_absente_de_l_environnement_exclusif(
        self, monkeypatch
    ):
        """Test qu'une variable du parent n'est pas transmise."""
        monkeypatch.setenv("COMMANDLINE_API_TEST", "present")
        result = Command(
            ["printenv", "COMMANDLINE_API_TEST"], environment={"K": "v"}
        ).execute()
        assert result.exit_code == 1
        assert result.stdout == ""

    @requires_bash
    def test_expansion_avec_bash(self):
        """Test que bash développe les variables."""
        executor = CommandExecutor.default(shell=Shell.BASH)
        result = Command(
            ["echo", "$V"], executor=executor, environment={"V": "x"}
        ).execute()
        assert result.stdout == "x\n"

    def test_pas_d_expansion_avec_env(self):
        """Test que env transmet $V littéralement."""
        result = Command(["echo", "$V"], environment={"V": "x"}).execute()
        assert result.stdout == "$V\n"


class TestPipe:
    """Tests des pipelines entre vrais processus."""

    def test_base64_aller_retour(self):
        """Test d'un encodage puis décodage base64."""
        encoded = Command(["echo", "-n", "Hi!"]).execute().pipe("base64")
        assert encoded.stdout == "SGkh\n"
        decoded = encoded.pipe("base64", "-d")
        assert decoded.stdout == "Hi!"

    def test_echo_vers_base64_decode(self):
        """Test de l'opérateur | depuis echo()."""
        result = echo("YmFuYW5h") | "base64 -d"
        assert result.exit_code == 0
        assert result.stdout == "banana"

    def test_operateur_liste(self, fruits):
        """Test de l'opérateur | avec des arguments découpés."""
        result = (
            Command(["ls"], working_directory=fruits).execute()
            | ["grep", "-v", "b"]
            | "sort -r"
        )
        assert result.stdout == "c\na\n"

    def test_pipeline_reprend_le_repertoire(self, fruits):
        """Test que l'étape suivante garde le répertoire de travail."""
        result = Command(["ls"], working_directory=fruits).execute() | "pwd"
        assert result.stdout.strip() == str(fruits.resolve())

    def test_pipeline_reprend_l_environnement(self):
        """Test que l'étape suivante garde l'environnement exclusif."""
        result = Command(
            ["echo", "x"], environment={"K": "v"}
        ).execute() | "printenv"
        assert result.stdout == "K=v\n"

    def test_echec_interrompt_le_pipeline(self, prompt):
        """Test du court-circuit après un programme introuvable."""
        result = Command(["cmdNotExist"]).execute() | "base64"
        assert result.exit_code == 127
        assert result.command.description == "cmdNotExist"
        assert prompt.prints == [
            "ERR{Cannot pipe to command 'cmdNotExist' "
            "because previous command ends with status 127.\n}"
        ]

    def test_pipeline_factice(self, prompt):
        """Test d'un pipeline simulé de bout en bout."""
        executor = CommandExecutor.dummy(stdout="o")
        result = Command(["a"], executor=executor).execute() | "b" | "c"
        assert result.stdout == "o"
        assert prompt.prints == [
            "Executed: a\n", "Executed: b\n", "Executed: c\n"
        ]


class TestShells:
    """Tests des différents lanceurs."""

    def test_pipe_litteral_avec_env(self):
        """Test que | reste un argument littéral avec env."""
        result = Command(["echo", "a", "|", "wc"]).execute()
        assert result.stdout == "a | wc\n"

    def test_chaine_unique_avec_pipe(self, fruits):
        """Test qu'une chaîne unique avec pipe est interprétée par sh."""
        result = Command(
            ["ls | grep -v b | sort -r"], working_directory=fruits
        ).execute()
        assert result.stdout == "c\na\n"

    @requires_bash
    def test_pipe_avec_bash(self, fruits):
        """Test d'un pipe interprété par bash."""
        executor = CommandExecutor.default(shell=Shell.BASH)
        result = Command(
            ["ls", "|", "sort", "-r"],
            executor=executor,
            working_directory=fruits,
        ).execute()
        assert result.stdout == "c\nb\na\n"

    @requires_bash
    def test_argument_protege_avec_bash(self):
        """Test qu'un argument protégé par quoted() reste un seul mot."""
        executor = CommandExecutor.default(shell=Shell.BASH)
        result = Command(
            ["echo", "-n", "hello world", "|", "grep", quoted("o w")],
            executor=executor,
        ).execute()
        assert result.stdout == "hello world\n"


class TestInteractive:
    """Tests de l'exécuteur interactif."""

    def test_code_de_sortie_et_sorties_vides(self):
        """Test que rien n'est capturé en interactif."""
        result = Command(
            ["sh", "-c", "exit 4"], executor=CommandExecutor.interactive()
        ).execute()
        assert result.exit_code == 4
        assert result.stdout == ""
        assert result.stderr == ""

    def test_sortie_sur_le_terminal(self, capfd):
        """Test que la sortie du processus va sur le terminal."""
        result = Command(
            ["echo", "-n", "b"], executor=CommandExecutor.interactive()
        ).execute()
        assert result.exit_code == 0
        assert result.stdout == ""
        assert capfd.readouterr().out == "b"
