"""Excepciones del Core.

Reglas:
- Las capas internas (config, adapters) lanzan; solo la CLI convierte una
  excepción en mensaje + código de salida.
- Errores de arranque (home) y de configuración (fichero) son tipos
  distintos: el primero aborta, el segundo se recupera con un mensaje.
"""

from __future__ import annotations

from pathlib import Path


class FalloError(Exception):
    """Base de todos los errores propios del cliente."""


class HomeDirectoryNotFoundError(FalloError):
    """No se pudo resolver el directorio home del usuario."""


class ConfigError(FalloError):
    """Problema con el fichero de configuración del usuario."""

    def __init__(self, path: Path, detail: str | None = None) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{path}: {detail}" if detail else str(path))


class ConfigFileMissingError(ConfigError):
    """El fichero no existe o no se puede leer."""


class ConfigFileInvalidError(ConfigError):
    """El fichero existe pero es TOML inválido o le faltan campos."""


class ServerUnreachableError(FalloError):
    """La petición no llegó a enviarse (DNS, conexión, TLS, timeout)."""

    def __init__(self, method: str, url: str, cause: Exception) -> None:
        self.method = method
        self.url = url
        self.cause = cause
        super().__init__(f"{method} {url}: {cause}")


class RedirectMapFormatError(FalloError):
    """El cuerpo de `GET /` no es un objeto JSON."""
