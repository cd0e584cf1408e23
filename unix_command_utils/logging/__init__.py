"""Module de logging."""

from unix_command_utils.logging.base import Logger
from unix_command_utils.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
