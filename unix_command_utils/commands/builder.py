"""Constructeurs de commandes locales et distantes.

Ce module fournit :
    - CommandBuilder : API fluent pour assembler une commande sous
      forme de liste de chaînes.
    - RemoteCommandBuilder : préfixe ssh et commande scp selon les
      SshOptions.

Example:
    Construction d'une commande distante :

        from unix_command_utils.commands import RemoteCommandBuilder

        builder = RemoteCommandBuilder()
        args = builder.ssh_args("alice", "example.com", ["ls", "-la"])
        # Résultat : ["ssh", "-q", "alice@example.com", "-o",
        #             "StrictHostKeyChecking=no ", "ls", "-la"]
"""

import shlex
from typing import List, Optional, Sequence

from unix_command_utils.commands.base import SshOptions


class CommandBuilder:
    """Constructeur fluent pour assembler des commandes système."""

    def __init__(self, program: str) -> None:
        """Initialise le constructeur avec le programme.

        Args:
            program: Nom ou chemin du programme à exécuter.

        Raises:
            ValueError: Si program est vide.
        """
        if not program or not program.strip():
            raise ValueError("Le programme est requis.")
        self._program: str = program
        self._options: List[str] = []
        self._args: List[str] = []

    def with_options(
        self, options: Sequence[str]
    ) -> "CommandBuilder":
        """Ajoute une liste d'options.

        Args:
            options: Liste d'options (ex: ['-o', 'BatchMode=yes']).

        Returns:
            L'instance courante pour le chaînage.
        """
        self._options.extend(options)
        return self

    def with_flag(self, flag: str) -> "CommandBuilder":
        """Ajoute un flag simple.

        Args:
            flag: Flag à ajouter (ex: '-q').

        Returns:
            L'instance courante pour le chaînage.
        """
        self._options.append(flag)
        return self

    def with_flag_if(
        self, flag: str, condition: bool = True
    ) -> "CommandBuilder":
        """Ajoute un flag seulement si la condition est vraie.

        Args:
            flag: Flag à ajouter.
            condition: Condition d'ajout (défaut: True).

        Returns:
            L'instance courante pour le chaînage.
        """
        if condition:
            self._options.append(flag)
        return self

    def with_option(
        self, key: str, value: str
    ) -> "CommandBuilder":
        """Ajoute une option clé=valeur.

        Args:
            key: Clé de l'option (ex: '--compression').
            value: Valeur de l'option (ex: 'lz4').

        Returns:
            L'instance courante pour le chaînage.
        """
        self._options.append(f"{key}={value}")
        return self

    def with_option_if(
        self,
        key: str,
        value: Optional[str],
        condition: bool = True,
    ) -> "CommandBuilder":
        """Ajoute une option seulement si la condition est vraie.

        L'option est ignorée si condition est False ou si
        value est None.

        Args:
            key: Clé de l'option.
            value: Valeur de l'option (peut être None).
            condition: Condition d'ajout (défaut: True).

        Returns:
            L'instance courante pour le chaînage.
        """
        if condition and value is not None:
            self._options.append(f"{key}={value}")
        return self

    def with_args(
        self, args: Sequence[str]
    ) -> "CommandBuilder":
        """Ajoute les arguments positionnels finaux.

        Args:
            args: Liste d'arguments positionnels.

        Returns:
            L'instance courante pour le chaînage.
        """
        self._args.extend(args)
        return self

    def build(self) -> List[str]:
        """Construit et retourne la commande sous forme de liste.

        Returns:
            Liste de chaînes représentant la commande complète.
        """
        return [self._program] + self._options + self._args


class RemoteCommandBuilder:
    """Construit les invocations ssh et scp.

    Les formes liste conservent l'espace final de la valeur
    StrictHostKeyChecking, les formes chaîne non : ce sont les
    invocations historiques attendues par les appelants existants.

    Les formes chaîne sont assemblées par shlex.join : un chemin
    contenant des espaces ou des métacaractères reste un seul
    argument après shlex.split.
    """

    def __init__(self, ssh_options: Optional[SshOptions] = None) -> None:
        """Initialise le constructeur.

        Args:
            ssh_options: Paramètres ssh/scp. Valeurs par défaut si None.
        """
        self._ssh_options = ssh_options or SshOptions()

    @property
    def ssh_options(self) -> SshOptions:
        """Retourne les paramètres ssh/scp utilisés."""
        return self._ssh_options

    def host_key_option(self) -> str:
        """Retourne la valeur de l'option StrictHostKeyChecking.

        Returns:
            'StrictHostKeyChecking=no' ou 'StrictHostKeyChecking=yes'.
        """
        value = "yes" if self._ssh_options.strict_host_key_checking else "no"
        return f"StrictHostKeyChecking={value}"

    @staticmethod
    def _target(user: str, host: str) -> str:
        """Valide et assemble la cible user@host.

        Raises:
            ValueError: Si user ou host est vide.
        """
        if not user or not user.strip():
            raise ValueError("L'utilisateur distant est requis.")
        if not host or not host.strip():
            raise ValueError("L'hôte distant est requis.")
        return f"{user}@{host}"

    def ssh_args(
        self, user: str, host: str, command: Sequence[str]
    ) -> List[str]:
        """Préfixe une liste d'arguments par l'invocation ssh.

        Args:
            user: Utilisateur distant.
            host: Hôte distant.
            command: Commande distante sous forme de liste.

        Returns:
            ssh [-q] user@host -o "StrictHostKeyChecking=no " <command...>
        """
        return (
            CommandBuilder(self._ssh_options.ssh_binary)
            .with_flag_if("-q", self._ssh_options.quiet)
            .with_flag(self._target(user, host))
            .with_options(["-o", f"{self.host_key_option()} "])
            .with_args(command)
            .build()
        )

    def ssh_command_line(
        self, user: str, host: str, command_line: str
    ) -> str:
        """Préfixe une chaîne de commande par l'invocation ssh.

        Args:
            user: Utilisateur distant.
            host: Hôte distant.
            command_line: Commande distante sous forme de chaîne.

        Returns:
            ssh [-q] user@host -o StrictHostKeyChecking=no <command_line>
        """
        parts = (
            CommandBuilder(self._ssh_options.ssh_binary)
            .with_flag_if("-q", self._ssh_options.quiet)
            .with_flag(self._target(user, host))
            .with_options(["-o", self.host_key_option()])
            .build()
        )
        return f"{shlex.join(parts)} {command_line}"

    def scp_command_line(
        self,
        user: str,
        host: str,
        remote_source: str,
        local_dest: str,
    ) -> str:
        """Construit la commande scp de copie distant vers local.

        Args:
            user: Utilisateur distant.
            host: Hôte distant.
            remote_source: Chemin du fichier distant.
            local_dest: Chemin de destination local.

        Returns:
            scp -o StrictHostKeyChecking=no user@host:<source> <dest>
        """
        parts = (
            CommandBuilder(self._ssh_options.scp_binary)
            .with_options(["-o", self.host_key_option()])
            .with_args([
                f"{self._target(user, host)}:{remote_source}",
                local_dest,
            ])
            .build()
        )
        return shlex.join(parts)
