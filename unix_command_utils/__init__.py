"""
Unix Command Utils - Exécution de commandes locales et distantes (ssh).

Modules disponibles:
- commands: Exécution de commandes et capture du résultat
  (CommandRunner, CommandResult, ExecutionOptions, SshOptions)
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions et handlers d'erreurs
- config: Chargement de configuration (TOML, JSON)
"""

__version__ = "1.0.0"

from unix_command_utils.logging import Logger, FileLogger
from unix_command_utils.config import (
    ConfigLoader,
    FileConfigLoader,
)
from unix_command_utils.errors import (
    ApplicationError,
    ConfigurationError,
    FileConfigurationError,
    ErrorHandler,
    ErrorHandlerChain,
    LoggerErrorHandler,
)
from unix_command_utils.commands import (
    CommandResult,
    CommandExecutor,
    CommandRunner,
    ExecutionOptions,
    SshOptions,
    SshConfigLoader,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    # Erreurs
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "LoggerErrorHandler",
    # Commandes
    "CommandResult",
    "CommandExecutor",
    "CommandRunner",
    "ExecutionOptions",
    "SshOptions",
    "SshConfigLoader",
]
