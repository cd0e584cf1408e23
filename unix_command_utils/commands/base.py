"""Interfaces abstraites et structures de données pour l'exécution
de commandes locales ou distantes.

Ce module définit :
    - CommandResult : Résultat immuable d'une exécution de commande.
    - ExecutionOptions : Options d'une exécution (log, attente, env).
    - SshOptions : Paramètres d'invocation de ssh et scp.
    - CommandExecutor : Interface abstraite pour les exécuteurs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Union

NULL_PROCESS_EXIT_CODE = -1
NULL_PROCESS_OUTPUT = "Null process"

Command = Union[str, Sequence[str]]


@dataclass(frozen=True)
class CommandResult:
    """Résultat de l'exécution d'une commande.

    L'égalité et le hash portent sur le couple (exit_code, output).
    str() retourne la sortie brute.

    Attributes:
        exit_code: Code de retour du processus. -1 est réservé au
            cas où aucun processus n'a pu être démarré.
        output: Sortie combinée (stdout + stderr) capturée, ou
            "Null process" si le processus n'a pas démarré.
    """

    exit_code: int = 0
    output: Optional[str] = None

    @property
    def success(self) -> bool:
        """True si la commande a réussi (code 0)."""
        return self.exit_code == 0

    @property
    def spawn_failed(self) -> bool:
        """True si le résultat est la sentinelle de démarrage échoué."""
        return (
            self.exit_code == NULL_PROCESS_EXIT_CODE
            and self.output == NULL_PROCESS_OUTPUT
        )

    def __str__(self) -> str:
        return self.output if self.output is not None else ""


NULL_PROCESS_RESULT = CommandResult(
    NULL_PROCESS_EXIT_CODE, NULL_PROCESS_OUTPUT
)


@dataclass(frozen=True)
class ExecutionOptions:
    """Options d'une exécution de commande.

    Attributes:
        log_output: Inclure la sortie capturée dans le log.
        wait_for_process: Attendre la fin du processus. Si False,
            seule la première ligne de sortie est lue et le code
            retour reste à 0.
        env: Variables d'environnement supplémentaires.
        cwd: Répertoire de travail.
    """

    log_output: bool = True
    wait_for_process: bool = True
    env: Optional[Dict[str, str]] = None
    cwd: Optional[str] = None


@dataclass(frozen=True)
class SshOptions:
    """Paramètres d'invocation des binaires ssh et scp.

    La vérification des clés d'hôte est désactivée par défaut
    (StrictHostKeyChecking=no) : un hôte inconnu ou dont la clé
    a changé est accepté sans confirmation. Passer
    strict_host_key_checking=True pour la réactiver.

    Attributes:
        strict_host_key_checking: Valeur de StrictHostKeyChecking.
        quiet: Ajoute -q à ssh.
        ssh_binary: Nom ou chemin du binaire ssh.
        scp_binary: Nom ou chemin du binaire scp.
    """

    strict_host_key_checking: bool = False
    quiet: bool = True
    ssh_binary: str = "ssh"
    scp_binary: str = "scp"


class CommandExecutor(ABC):
    """Interface abstraite pour l'exécution de commandes."""

    @abstractmethod
    def execute(
        self,
        command: Command,
        options: Optional[ExecutionOptions] = None,
    ) -> CommandResult:
        """Exécute une commande locale et retourne le résultat.

        Args:
            command: Liste d'arguments (sans shell) ou chaîne
                interprétée par le shell.
            options: Options d'exécution.

        Returns:
            Résultat de l'exécution.
        """
        pass

    @abstractmethod
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
            Résultat de l'exécution.
        """
        pass

    @abstractmethod
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
        """
        pass
