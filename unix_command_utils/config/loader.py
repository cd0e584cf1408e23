"""Lecture des fichiers de configuration (TOML ou JSON).

FileConfigLoader lit le fichier brut ; ConfigFileLoader en extrait
une section que ses sous-classes (ex: SshConfigLoader) valident avec
validate_with_schema avant de construire leur objet de configuration.
"""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, Generic, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


def validate_with_schema(data: Dict[str, Any], schema: type[M]) -> M:
    """Valide une section brute avec un modèle Pydantic.

    Raises:
        TypeError: Si schema n'est pas une sous-classe de BaseModel.
        pydantic.ValidationError: Si la section est invalide.
    """
    if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
        raise TypeError(
            f"Schéma Pydantic attendu (sous-classe de BaseModel), "
            f"reçu: {schema!r}"
        )
    return schema.model_validate(data)


def _read_toml(path: Path) -> Dict[str, Any]:
    with path.open("rb") as f:
        return tomllib.load(f)


def _read_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


class ConfigLoader(ABC):
    """Source d'un dictionnaire de configuration, injectable en test."""

    @abstractmethod
    def load(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Retourne le contenu brut du fichier config_path."""


class FileConfigLoader(ConfigLoader):
    """Lit un fichier .toml ou .json selon son extension."""

    READERS: Dict[str, Callable[[Path], Dict[str, Any]]] = {
        ".toml": _read_toml,
        ".json": _read_json,
    }

    def load(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Lit le fichier et retourne son contenu brut.

        Raises:
            FileNotFoundError: Si le fichier n'existe pas.
            ValueError: Si l'extension n'est ni .toml ni .json.
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé: {path}"
            )
        reader = self.READERS.get(path.suffix.lower())
        if reader is None:
            raise ValueError(
                f"Extension non supportée: {path.suffix}. "
                "Utilisez .toml ou .json"
            )
        return reader(path)


class ConfigFileLoader(ABC, Generic[T]):
    """Base des chargeurs qui construisent un objet T depuis une section.

    Le fichier est lu une seule fois, à la construction.
    """

    def __init__(
        self,
        config_path: str | Path,
        config_loader: ConfigLoader | None = None
    ) -> None:
        self._config_path = Path(config_path)
        reader = config_loader or FileConfigLoader()
        self._config: Dict[str, Any] = reader.load(config_path)

    @property
    def config(self) -> Dict[str, Any]:
        """Contenu brut du fichier."""
        return self._config

    def _get_section(self, section: str) -> Dict[str, Any]:
        """Retourne la section demandée.

        Raises:
            KeyError: Si la section est absente (les sections
                présentes sont listées dans le message).
        """
        try:
            return self._config[section]
        except KeyError:
            raise KeyError(
                f"Section '{section}' absente de {self._config_path}. "
                f"Sections disponibles: {sorted(self._config)}"
            ) from None

    @abstractmethod
    def load(self, section: str | None = None) -> T:
        """Construit l'objet de configuration depuis section."""
