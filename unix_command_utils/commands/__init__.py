"""Module d'exécution de commandes locales et distantes.

Ce module fournit des classes pour construire et exécuter des
commandes en local ou via ssh, et capturer leur code retour et
leur sortie combinée.

Classes disponibles :
    CommandResult : Résultat immuable d'une exécution.
    ExecutionOptions : Options d'une exécution.
    SshOptions : Paramètres d'invocation de ssh et scp.
    CommandExecutor : Interface abstraite pour les exécuteurs.
    CommandRunner : Exécuteur concret via subprocess.
    CommandBuilder : Constructeur fluent de commandes.
    RemoteCommandBuilder : Constructeur des invocations ssh/scp.
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Formatage texte brut (logs fichier).
    AnsiCommandFormatter : Formatage ANSI coloré (console).
    SshConfigLoader : Chargement de SshOptions depuis TOML/JSON.
"""

from unix_command_utils.commands.base import (
    NULL_PROCESS_EXIT_CODE,
    NULL_PROCESS_OUTPUT,
    NULL_PROCESS_RESULT,
    CommandExecutor,
    CommandResult,
    ExecutionOptions,
    SshOptions,
)
from unix_command_utils.commands.builder import (
    CommandBuilder,
    RemoteCommandBuilder,
)
from unix_command_utils.commands.config_loader import (
    SshConfigLoader,
    SshSettings,
)
from unix_command_utils.commands.formatter import (
    AnsiCommandFormatter,
    CommandFormatter,
    PlainCommandFormatter,
)
from unix_command_utils.commands.runner import CommandRunner

__all__ = [
    # Structures de données
    "CommandResult",
    "ExecutionOptions",
    "SshOptions",
    "NULL_PROCESS_EXIT_CODE",
    "NULL_PROCESS_OUTPUT",
    "NULL_PROCESS_RESULT",
    # Interface abstraite
    "CommandExecutor",
    # Constructeurs
    "CommandBuilder",
    "RemoteCommandBuilder",
    # Formateurs
    "CommandFormatter",
    "PlainCommandFormatter",
    "AnsiCommandFormatter",
    # Configuration
    "SshConfigLoader",
    "SshSettings",
    # Implémentation
    "CommandRunner",
]
