"""Chargeur de configuration pour les paramètres ssh/scp.

Ce module fournit une classe pour charger un fichier de configuration
(TOML ou JSON) et créer un SshOptions pour CommandRunner.

Example:
    Chargement depuis un fichier TOML:

        loader = SshConfigLoader("config/remote.toml")
        runner = CommandRunner(ssh_options=loader.load())

    Fichier de configuration attendu:

        [ssh]
        strict_host_key_checking = true
        quiet = true
        ssh_binary = "/usr/bin/ssh"
        scp_binary = "/usr/bin/scp"

    Toutes les clés sont optionnelles ; une clé inconnue est refusée.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from unix_command_utils.commands.base import SshOptions
from unix_command_utils.config import (
    ConfigFileLoader,
    ConfigLoader,
    validate_with_schema,
)
from unix_command_utils.errors.exceptions import FileConfigurationError


class SshSettings(BaseModel):
    """Schéma de validation de la section [ssh]."""

    model_config = ConfigDict(extra="forbid")

    strict_host_key_checking: bool = False
    quiet: bool = True
    ssh_binary: str = "ssh"
    scp_binary: str = "scp"

    @field_validator("ssh_binary", "scp_binary")
    @classmethod
    def binary_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le binaire ne peut pas être vide")
        return v


class SshConfigLoader(ConfigFileLoader[SshOptions]):
    """Chargeur de configuration pour SshOptions.

    Attributes:
        DEFAULT_SECTION: Nom de la section par défaut ("ssh").
    """

    DEFAULT_SECTION: str = "ssh"

    def __init__(
        self,
        config_path: str | Path,
        config_loader: ConfigLoader | None = None
    ) -> None:
        """Initialise le loader pour SshOptions.

        Args:
            config_path: Chemin vers le fichier de configuration
                (.toml ou .json).
            config_loader: Chargeur de configuration injectable (DIP).

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            ValueError: Si l'extension n'est pas supportée.
        """
        super().__init__(config_path, config_loader)

    def load(self, section: str | None = None) -> SshOptions:
        """Charge et retourne un SshOptions.

        Args:
            section: Nom de la section à charger. Par défaut "ssh".

        Returns:
            Instance de SshOptions avec les valeurs du fichier.

        Raises:
            KeyError: Si la section n'existe pas.
            FileConfigurationError: Si la section est invalide.
        """
        section_name = section or self.DEFAULT_SECTION
        data = self._get_section(section_name)
        try:
            settings = validate_with_schema(data, SshSettings)
        except ValidationError as e:
            raise FileConfigurationError(
                f"Section [{section_name}] invalide dans "
                f"{self._config_path}: {e}"
            ) from e
        return SshOptions(**settings.model_dump())
