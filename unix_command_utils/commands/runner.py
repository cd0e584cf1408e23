"""Exécuteur de commandes locales et distantes via subprocess.

Ce module fournit CommandRunner, une implémentation concrète de
CommandExecutor qui lance un processus, capture sa sortie combinée
(stdout + stderr) et retourne un CommandResult.

L'exécuteur ne lève jamais d'exception vers l'appelant pour un échec
d'exécution : un processus impossible à démarrer produit le résultat
sentinelle CommandResult(-1, "Null process"), les autres échecs sont
journalisés et un résultat partiel est retourné.

Example :
    Exécution locale et distante :

        from unix_command_utils import FileLogger
        from unix_command_utils.commands import (
            CommandRunner,
            ExecutionOptions,
        )

        logger = FileLogger(
            "/var/log/app.log", config={"logging": {"level": "DEBUG"}}
        )
        runner = CommandRunner(logger=logger)
        result = runner.execute(["ls", "-la"])
        print(result.exit_code, result.output)

        result = runner.execute_remote(
            "alice", "example.com", "uptime",
            ExecutionOptions(log_output=False),
        )
        runner.copy_file("alice", "example.com", "/etc/hosts", "/tmp/h")

Note :
    Aucun timeout n'est appliqué : un processus bloqué bloque
    l'appelant.
"""

import os
import shlex
import subprocess  # nosec B404
from dataclasses import replace
from typing import IO, Dict, List, Optional, Union

from unix_command_utils.commands.base import (
    NULL_PROCESS_RESULT,
    Command,
    CommandExecutor,
    CommandResult,
    ExecutionOptions,
    SshOptions,
)
from unix_command_utils.commands.builder import RemoteCommandBuilder
from unix_command_utils.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from unix_command_utils.errors.base import ErrorHandler
from unix_command_utils.errors.logger_handler import LoggerErrorHandler
from unix_command_utils.logging.base import Logger

REAP_TIMEOUT = 1.0


class CommandRunner(CommandExecutor):
    """Exécuteur de commandes locales ou distantes (ssh/scp).

    Chaque appel est indépendant : le processus, son flux de sortie
    et les ressources associées appartiennent à l'appel. Une même
    instance peut donc être utilisée depuis plusieurs threads.

    Les comptes rendus d'exécution sont envoyés au logger au niveau
    DEBUG via PlainCommandFormatter. Un console_formatter optionnel
    (ex: AnsiCommandFormatter) les affiche en parallèle sur stdout.

    Attributes:
        _logger: Logger optionnel.
        _remote: Constructeur des invocations ssh/scp.
        _default_env: Variables d'environnement par défaut.
        _dry_run: Mode simulation.
        _plain: Formateur texte brut pour les logs.
        _console_formatter: Formateur optionnel pour la console.
        _error_handler: Handler des erreurs inattendues.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        ssh_options: Optional[SshOptions] = None,
        default_env: Optional[Dict[str, str]] = None,
        dry_run: bool = False,
        console_formatter: Optional[CommandFormatter] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        """Initialise l'exécuteur de commandes.

        Args:
            logger: Logger optionnel pour les comptes rendus.
            ssh_options: Paramètres ssh/scp (StrictHostKeyChecking
                désactivé par défaut).
            default_env: Variables d'environnement par défaut
                (fusionnées avec os.environ).
            dry_run: Si True, simule sans exécuter.
            console_formatter: Formateur optionnel pour la console.
            error_handler: Handler des erreurs inattendues. Par défaut
                un LoggerErrorHandler sur logger, s'il est fourni.
        """
        self._logger = logger
        self._remote = RemoteCommandBuilder(ssh_options)
        self._default_env = default_env
        self._dry_run = dry_run
        self._plain = PlainCommandFormatter()
        self._console_formatter = console_formatter
        if error_handler is None and logger is not None:
            error_handler = LoggerErrorHandler(logger)
        self._error_handler = error_handler

    @property
    def ssh_options(self) -> SshOptions:
        """Retourne les paramètres ssh/scp de l'exécuteur."""
        return self._remote.ssh_options

    def execute(
        self,
        command: Command,
        options: Optional[ExecutionOptions] = None,
    ) -> CommandResult:
        """Exécute une commande locale et retourne le résultat.

        Une liste est exécutée telle quelle : le premier élément est
        le programme. Une chaîne est découpée en arguments (shlex.split)
        puis exécutée de la même façon, sans shell : les métacaractères
        (;, |, &&) restent de simples arguments. Une chaîne attend
        toujours la fin du processus, quel que soit
        options.wait_for_process.

        Args:
            command: Liste d'arguments ou chaîne de commande.
            options: Options d'exécution (défaut: log de la sortie
                et attente de la fin du processus).

        Returns:
            CommandResult(code, sortie), ou CommandResult(-1,
            "Null process") si le processus n'a pas pu démarrer.
        """
        options = options or ExecutionOptions()
        if isinstance(command, str):
            if not options.wait_for_process:
                options = replace(options, wait_for_process=True)
            return self._run(command, command, options)
        args = list(command)
        return self._run(args, " ".join(args), options)

    def execute_remote(
        self,
        user: str,
        host: str,
        command: Command,
        options: Optional[ExecutionOptions] = None,
    ) -> CommandResult:
        """Exécute une commande sur un hôte distant via ssh.

        Args:
            user: Utilisateur distant.
            host: Hôte distant.
            command: Liste d'arguments ou chaîne de commande.
            options: Options d'exécution.

        Returns:
            Résultat de l'exécution de ssh.

        Raises:
            ValueError: Si user ou host est vide.
        """
        if isinstance(command, str):
            remote = self._remote.ssh_command_line(user, host, command)
        else:
            remote = self._remote.ssh_args(user, host, command)
        return self.execute(remote, options)

    def copy_file(
        self,
        user: str,
        host: str,
        remote_source: str,
        local_dest: str,
    ) -> CommandResult:
        """Copie un fichier distant vers la machine locale via scp.

        Args:
            user: Utilisateur distant.
            host: Hôte distant.
            remote_source: Chemin du fichier sur l'hôte distant.
            local_dest: Chemin de destination local.

        Returns:
            Résultat de l'exécution de scp.

        Raises:
            ValueError: Si user ou host est vide.
        """
        return self.execute(
            self._remote.scp_command_line(
                user, host, remote_source, local_dest
            )
        )

    def _build_env(
        self,
        env: Optional[Dict[str, str]] = None,
    ) -> Optional[Dict[str, str]]:
        """Construit l'environnement d'exécution.

        Fusionne os.environ, default_env et env spécifique.
        Retourne None si aucun environnement personnalisé
        (subprocess utilisera os.environ par défaut).

        Args:
            env: Variables d'environnement spécifiques.

        Returns:
            Dictionnaire d'environnement ou None.
        """
        if self._default_env is None and env is None:
            return None
        merged = os.environ.copy()
        if self._default_env:
            merged.update(self._default_env)
        if env:
            merged.update(env)
        return merged

    def _log_debug(self, message: str) -> None:
        if self._logger:
            self._logger.log_debug(message)

    def _log_error(self, message: str) -> None:
        if self._logger:
            self._logger.log_error(message)

    def _console(self, message: str) -> None:
        if self._console_formatter:
            print(message)

    def _run(
        self,
        command: Union[str, List[str]],
        command_text: str,
        options: ExecutionOptions,
    ) -> CommandResult:
        """Démarre le processus puis capture son résultat."""
        if self._dry_run:
            return self._make_dry_run_result(command_text)

        process = self._spawn(command, command_text, options)
        if process is None:
            return NULL_PROCESS_RESULT
        return self._capture(process, command_text, options)

    def _make_dry_run_result(self, command_text: str) -> CommandResult:
        """Journalise la commande simulée et retourne un succès vide."""
        self._log_debug(self._plain.format_dry_run(command_text))
        if self._console_formatter:
            self._console(
                self._console_formatter.format_dry_run(command_text)
            )
        return CommandResult(0, "")

    def _spawn(
        self,
        command: Union[str, List[str]],
        command_text: str,
        options: ExecutionOptions,
    ) -> Optional[subprocess.Popen]:
        """Démarre le processus avec stderr fusionné dans stdout.

        Une chaîne est découpée avec shlex.split ; une chaîne mal
        formée (guillemet non fermé) est un échec de démarrage.

        Returns:
            Le processus démarré, ou None si le démarrage a échoué
            (échec journalisé).
        """
        try:
            args = (
                shlex.split(command) if isinstance(command, str)
                else command
            )
            if not args:
                raise ValueError("Commande vide")
            return subprocess.Popen(  # nosec B603
                args,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                encoding="utf-8",
                errors="replace",
                env=self._build_env(options.env),
                cwd=options.cwd,
            )
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            self._log_error(
                self._plain.format_spawn_failure(command_text, e)
            )
            if self._console_formatter:
                self._console(
                    self._console_formatter.format_spawn_failure(
                        command_text, e
                    )
                )
            return None

    def _capture(
        self,
        process: subprocess.Popen,
        command_text: str,
        options: ExecutionOptions,
    ) -> CommandResult:
        """Lit la sortie du processus et construit le résultat.

        Avec wait_for_process, toute la sortie est lue puis le code
        retour est attendu. Sinon, seule la première ligne est lue
        et le code retour reste à 0.
        """
        lines: List[str] = []
        exit_code = 0
        try:
            if options.wait_for_process:
                self._drain(process.stdout, lines)
                exit_code = process.wait()
            else:
                self._read_first_line(process.stdout, lines)
        except Exception as e:
            if self._error_handler:
                self._error_handler.handle(e)
        finally:
            self._release(process)

        output = "\n".join(lines)
        self._log_execution(
            command_text, output, exit_code, options.log_output
        )
        return CommandResult(exit_code, output)

    @staticmethod
    def _drain(stream: Optional[IO[str]], lines: List[str]) -> None:
        """Lit le flux jusqu'à sa fin, ligne par ligne."""
        if stream is None:
            return
        try:
            for line in stream:
                lines.append(line.rstrip("\n"))
        except OSError:
            pass  # Flux déjà fermé : la sortie lue jusqu'ici est conservée

    @staticmethod
    def _read_first_line(
        stream: Optional[IO[str]], lines: List[str]
    ) -> None:
        """Lit au plus une ligne du flux."""
        if stream is None:
            return
        try:
            line = stream.readline()
        except OSError:
            return
        if line:
            lines.append(line.rstrip("\n"))

    @staticmethod
    def _release(process: subprocess.Popen) -> None:
        """Termine le processus, ferme son flux de sortie et le récolte.

        Un processus encore actif (mode sans attente) est attendu au
        plus REAP_TIMEOUT secondes après terminate(). Chaque
        libération est tentée indépendamment, aucune erreur n'est
        propagée.
        """
        releases = [process.terminate]
        if process.stdout is not None:
            releases.append(process.stdout.close)
        releases.append(lambda: CommandRunner._reap(process))
        for release in releases:
            try:
                release()
            except Exception:  # nosec B112
                continue

    @staticmethod
    def _reap(process: subprocess.Popen) -> None:
        if process.returncode is None:
            process.wait(timeout=REAP_TIMEOUT)

    def _log_execution(
        self,
        command_text: str,
        output: str,
        exit_code: int,
        log_output: bool,
    ) -> None:
        """Journalise la commande, sa sortie et son code retour."""
        self._log_debug(
            self._plain.format_execution(
                command_text, output, exit_code, log_output
            )
        )
        if self._console_formatter:
            self._console(
                self._console_formatter.format_execution(
                    command_text, output, exit_code, log_output
                )
            )
