"""Module de gestion des erreurs."""

from unix_command_utils.errors.base import ErrorHandler, ErrorHandlerChain
from unix_command_utils.errors.exceptions import (ApplicationError,
                                                  ConfigurationError,
                                                  FileConfigurationError)
from unix_command_utils.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "ErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
