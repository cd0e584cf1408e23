"""
Module contenant les exceptions personnalisées de unix_command_utils.

L'exécution de commandes ne lève jamais d'exception vers l'appelant :
ces classes concernent la configuration de l'exécuteur.
"""


class ApplicationError(Exception):
    """Exception de base pour toutes les applications."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les configurations."""
    pass


class FileConfigurationError(ConfigurationError):
    """Fichier de configuration présent mais invalide."""
    pass
