"""Tests pour le module commands : résultats, constructeurs, formateurs."""

import shlex
from unittest.mock import patch

import pytest

from unix_command_utils.commands import (
    NULL_PROCESS_RESULT,
    AnsiCommandFormatter,
    CommandBuilder,
    CommandFormatter,
    CommandResult,
    ExecutionOptions,
    PlainCommandFormatter,
    RemoteCommandBuilder,
    SshOptions,
)


# --- Tests CommandResult ---


class TestCommandResult:
    """Tests pour la dataclass CommandResult."""

    def test_creation(self):
        """Test de la création avec code et sortie."""
        result = CommandResult(0, "fichier.txt")
        assert result.exit_code == 0
        assert result.output == "fichier.txt"

    def test_valeurs_par_defaut(self):
        """Le résultat par défaut vaut (0, None)."""
        result = CommandResult()
        assert result.exit_code == 0
        assert result.output is None
        assert str(result) == ""

    @pytest.mark.parametrize("exit_code,output", [
        (0, "a\nb"),
        (3, ""),
        (-1, "Null process"),
        (0, None),
    ])
    def test_egalite_et_hash_par_valeur(self, exit_code, output):
        """Deux résultats de mêmes valeurs sont égaux et de même hash."""
        first = CommandResult(exit_code, output)
        second = CommandResult(exit_code, output)
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_inegalite(self):
        """Un code ou une sortie différents rendent les résultats inégaux."""
        assert CommandResult(0, "a") != CommandResult(1, "a")
        assert CommandResult(0, "a") != CommandResult(0, "b")
        assert CommandResult(0, "a") != "a"

    def test_str_retourne_la_sortie(self):
        """str() retourne la sortie brute."""
        assert str(CommandResult(2, "erreur\ndétail")) == "erreur\ndétail"

    def test_frozen(self):
        """Test que la dataclass est immuable."""
        result = CommandResult(0, "")
        with pytest.raises(AttributeError):
            result.exit_code = 1

    def test_success(self):
        """success est vrai uniquement pour le code 0."""
        assert CommandResult(0, "").success is True
        assert CommandResult(1, "").success is False

    def test_sentinelle_processus_nul(self):
        """La sentinelle se distingue d'un échec de commande."""
        assert NULL_PROCESS_RESULT == CommandResult(-1, "Null process")
        assert NULL_PROCESS_RESULT.spawn_failed is True
        assert CommandResult(-1, "autre").spawn_failed is False
        assert CommandResult(127, "").spawn_failed is False


class TestExecutionOptions:
    """Tests pour ExecutionOptions."""

    def test_valeurs_par_defaut(self):
        """Par défaut, log de la sortie et attente du processus."""
        options = ExecutionOptions()
        assert options.log_output is True
        assert options.wait_for_process is True
        assert options.env is None
        assert options.cwd is None


# --- Tests CommandBuilder ---


class TestCommandBuilder:
    """Tests pour le constructeur fluent CommandBuilder."""

    def test_build_programme_seul(self):
        """Test de build avec le programme seul."""
        assert CommandBuilder("ls").build() == ["ls"]

    def test_with_flag(self):
        """Test d'ajout d'un flag simple."""
        cmd = CommandBuilder("ls").with_flag("-l").build()
        assert cmd == ["ls", "-l"]

    def test_with_flag_if(self):
        """Le flag n'est ajouté que si la condition est vraie."""
        cmd = (
            CommandBuilder("ssh")
            .with_flag_if("-q", True)
            .with_flag_if("-v", False)
            .build()
        )
        assert cmd == ["ssh", "-q"]

    def test_with_option_cle_valeur(self):
        """Test d'ajout d'une option clé=valeur."""
        cmd = (
            CommandBuilder("borg")
            .with_option("--compression", "lz4")
            .build()
        )
        assert cmd == ["borg", "--compression=lz4"]

    def test_with_option_if_valeur_none(self):
        """Test d'ajout conditionnel avec valeur None."""
        cmd = (
            CommandBuilder("rsync")
            .with_option_if("--exclude-from", None)
            .build()
        )
        assert cmd == ["rsync"]

    def test_chainage_complet(self):
        """Les options précèdent les arguments positionnels."""
        cmd = (
            CommandBuilder("scp")
            .with_args(["src", "dst"])
            .with_options(["-o", "BatchMode=yes"])
            .with_flag("-p")
            .build()
        )
        assert cmd == ["scp", "-o", "BatchMode=yes", "-p", "src", "dst"]

    def test_programme_vide_leve_erreur(self):
        """Test qu'un programme vide lève ValueError."""
        with pytest.raises(ValueError):
            CommandBuilder("")

    def test_programme_espaces_leve_erreur(self):
        """Test qu'un programme d'espaces lève ValueError."""
        with pytest.raises(ValueError):
            CommandBuilder("   ")


# --- Tests RemoteCommandBuilder ---


class TestRemoteCommandBuilder:
    """Tests pour les invocations ssh et scp."""

    def setup_method(self):
        """Constructeur avec les options par défaut."""
        self.builder = RemoteCommandBuilder()

    def test_ssh_args(self):
        """Forme liste : valeur de l'option suivie d'un espace."""
        args = self.builder.ssh_args(
            "alice", "example.com", ["ls", "-la"]
        )
        assert args == [
            "ssh", "-q", "alice@example.com",
            "-o", "StrictHostKeyChecking=no ",
            "ls", "-la",
        ]

    def test_ssh_command_line(self):
        """Forme chaîne : commande ajoutée après l'option."""
        line = self.builder.ssh_command_line(
            "alice", "example.com", "df -h"
        )
        assert line == (
            "ssh -q alice@example.com -o StrictHostKeyChecking=no df -h"
        )

    def test_scp_command_line(self):
        """Copie distant vers local."""
        line = self.builder.scp_command_line(
            "bob", "h", "/remote/f", "/local/f"
        )
        assert line == (
            "scp -o StrictHostKeyChecking=no bob@h:/remote/f /local/f"
        )

    def test_scp_command_line_chemins_proteges(self):
        """Espaces et métacaractères restent dans un seul argument."""
        line = self.builder.scp_command_line(
            "bob", "h", "/remote/mon fichier", "/local/f; touch x"
        )
        assert line == (
            "scp -o StrictHostKeyChecking=no "
            "'bob@h:/remote/mon fichier' '/local/f; touch x'"
        )
        assert shlex.split(line)[-1] == "/local/f; touch x"

    def test_ssh_command_line_cible_protegee(self):
        """La cible est protégée, la commande distante est conservée."""
        line = self.builder.ssh_command_line(
            "alice", "h;id", "uptime"
        )
        assert line == (
            "ssh -q 'alice@h;id' -o StrictHostKeyChecking=no uptime"
        )

    def test_verification_cles_activee(self):
        """strict_host_key_checking=True produit la valeur yes."""
        builder = RemoteCommandBuilder(
            SshOptions(strict_host_key_checking=True)
        )
        assert builder.host_key_option() == "StrictHostKeyChecking=yes"
        assert "StrictHostKeyChecking=yes" in builder.scp_command_line(
            "bob", "h", "/a", "/b"
        )

    def test_sans_quiet_et_binaires_personnalises(self):
        """quiet=False retire -q, les binaires sont configurables."""
        builder = RemoteCommandBuilder(SshOptions(
            quiet=False,
            ssh_binary="/usr/bin/ssh",
            scp_binary="/usr/bin/scp",
        ))
        args = builder.ssh_args("alice", "h", ["id"])
        assert args[:2] == ["/usr/bin/ssh", "alice@h"]
        assert builder.scp_command_line(
            "alice", "h", "/a", "/b"
        ).startswith("/usr/bin/scp ")

    @pytest.mark.parametrize("user,host", [
        ("", "example.com"),
        ("alice", ""),
        ("  ", "example.com"),
    ])
    def test_cible_vide_leve_erreur(self, user, host):
        """Utilisateur ou hôte vide lève ValueError."""
        with pytest.raises(ValueError):
            self.builder.ssh_args(user, host, ["ls"])


# --- Tests des formateurs ---


class TestPlainCommandFormatter:
    """Tests pour le format texte brut des comptes rendus."""

    def setup_method(self):
        """Initialise le formateur."""
        self.formatter = PlainCommandFormatter()

    def test_implements_interface(self):
        """Vérifie l'héritage de CommandFormatter."""
        assert isinstance(self.formatter, CommandFormatter)

    def test_succes_sans_sortie(self):
        """Commande seule si code nul et sortie vide."""
        assert self.formatter.format_execution(
            "true", "", 0, True
        ) == "true"

    def test_succes_avec_sortie(self):
        """La sortie suit la commande après une tabulation."""
        assert self.formatter.format_execution(
            "echo hello", "hello", 0, True
        ) == "echo hello\n\thello"

    def test_echec_avec_sortie(self):
        """Le code retour non nul est ajouté en dernier."""
        assert self.formatter.format_execution(
            "cmd", "oops", 2, True
        ) == "cmd\n\toops\n\tExit value = 2"

    def test_echec_sans_sortie(self):
        """Code retour non nul sans sortie."""
        assert self.formatter.format_execution(
            "false", "", 1, True
        ) == "false\n\tExit value = 1"

    def test_sortie_masquee(self):
        """log_output=False masque la sortie quel que soit son contenu."""
        assert self.formatter.format_execution(
            "cat secret", "mot de passe", 0, False
        ) == "cat secret"
        assert self.formatter.format_execution(
            "cat secret", "mot de passe", 1, False
        ) == "cat secret\n\tExit value = 1"

    def test_dry_run(self):
        """Préfixe [dry-run]."""
        assert self.formatter.format_dry_run(
            "rm -rf /tmp/x"
        ) == "[dry-run] rm -rf /tmp/x"

    def test_spawn_failure(self):
        """Le message contient la commande et l'exception."""
        message = self.formatter.format_spawn_failure(
            "inexistant", FileNotFoundError("introuvable")
        )
        assert "inexistant" in message
        assert "FileNotFoundError" in message


class TestAnsiCommandFormatter:
    """Tests pour le formateur ANSI."""

    def setup_method(self):
        """Initialise le formateur."""
        self.formatter = AnsiCommandFormatter()

    def test_sans_tty_texte_brut(self):
        """Hors TTY, le texte est identique au format brut."""
        with patch.object(
            AnsiCommandFormatter, "_is_tty", return_value=False
        ):
            text = self.formatter.format_execution(
                "cmd", "oops", 2, True
            )
        assert text == "cmd\n\toops\n\tExit value = 2"

    def test_tty_succes_en_vert(self):
        """En TTY, seule la commande est colorée."""
        with patch.object(
            AnsiCommandFormatter, "_is_tty", return_value=True
        ):
            text = self.formatter.format_execution(
                "echo hi", "hi", 0, True
            )
        assert text == (
            f"{AnsiCommandFormatter.SUCCESS_STYLE}echo hi"
            f"{AnsiCommandFormatter.RESET}\n\thi"
        )

    def test_tty_echec_en_jaune(self):
        """Un code non nul utilise le style d'échec."""
        with patch.object(
            AnsiCommandFormatter, "_is_tty", return_value=True
        ):
            text = self.formatter.format_execution("false", "", 1, True)
        assert text.startswith(AnsiCommandFormatter.FAILURE_STYLE)
        assert text.endswith("\n\tExit value = 1")

    def test_tty_dry_run_gris(self):
        """Le mode simulation utilise le style gris."""
        with patch.object(
            AnsiCommandFormatter, "_is_tty", return_value=True
        ):
            text = self.formatter.format_dry_run("ls")
        assert text == (
            f"{AnsiCommandFormatter.DRY_STYLE}[dry-run] ls"
            f"{AnsiCommandFormatter.RESET}"
        )
