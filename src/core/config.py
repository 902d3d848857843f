"""Configuración del cliente.

Por qué aquí:
- Centraliza la lectura de `~/.config/fallo/config.toml` (pydantic-settings)
  sin contaminar la CLI.
- Las variables `FALLO_*` pueden sobrescribir valores del fichero, pero el
  fichero tiene que existir.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from core.errors import (
    ConfigFileInvalidError,
    ConfigFileMissingError,
    HomeDirectoryNotFoundError,
)

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "fallo"
CONFIG_FILE_NAME = "config.toml"


def get_home_dir() -> Path:
    """Directorio home del usuario.

    `Path.home()` lanza `RuntimeError` (o `KeyError` en algunos entornos sin
    `HOME`/`pwd`) cuando no puede resolverlo.
    """

    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeDirectoryNotFoundError(str(exc)) from exc


def get_user_config_dir() -> Path:
    return get_home_dir() / ".config" / CONFIG_DIR_NAME


def get_config_file() -> Path:
    return get_user_config_dir() / CONFIG_FILE_NAME


class AppSettings(BaseSettings):
    """Credenciales y servidor para una invocación.

    Ambos campos son obligatorios: no hay defaults razonables para un
    servidor propio.
    """

    model_config = SettingsConfigDict(
        env_prefix="FALLO_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    api_key: str = Field(
        ...,
        description="Valor enviado en la cabecera `x-api-key`.",
    )
    server_url: str = Field(
        ...,
        min_length=1,
        description="URL base del servidor fallo, sin barra final.",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Orden: kwargs explícitos, luego entorno, luego el TOML del usuario.
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=get_config_file()),
        )


def load_settings() -> AppSettings:
    """Carga `AppSettings` desde el fichero del usuario.

    Lanza:
    - `HomeDirectoryNotFoundError` si no hay home.
    - `ConfigFileMissingError` si el fichero no existe o no se puede leer.
    - `ConfigFileInvalidError` si el TOML es inválido o incompleto.
    """

    path = get_config_file()

    try:
        with path.open("rb"):
            pass
    except OSError as exc:
        logger.debug("Config file %s not readable: %s", path, exc)
        raise ConfigFileMissingError(path, exc.strerror) from exc

    try:
        # TOMLDecodeError y ValidationError son ambos ValueError.
        settings = AppSettings()
    except ValueError as exc:
        logger.debug("Config file %s rejected: %s", path, exc)
        raise ConfigFileInvalidError(path, str(exc)) from exc

    logger.debug("Loaded config from %s (server_url=%s)", path, settings.server_url)
    return settings
