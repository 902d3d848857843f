"""Configuración de logging para la CLI.

Reglas:
- Los registros van a stderr con `rich.logging.RichHandler`; stdout solo
  lleva la salida del comando.
- El nivel sale de `FALLO_LOG_LEVEL` (debug, info, warning, error); por
  defecto `WARNING`, así una ejecución normal no muestra diagnósticos.
- Llamadas repetidas reemplazan el handler en vez de acumularlos.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "FALLO_LOG_LEVEL"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def resolve_level(raw: str | None) -> int:
    return _LEVELS.get((raw or "").strip().lower(), logging.WARNING)


def configure_logging(level: str | None = None) -> None:
    """Configura el logger raíz; `level` tiene prioridad sobre `FALLO_LOG_LEVEL`."""

    logger = logging.getLogger()
    logger.setLevel(resolve_level(level or os.environ.get(LOG_LEVEL_ENV)))

    for h in list(logger.handlers):
        if getattr(h, "_added_by_configure_logging", False):
            logger.removeHandler(h)
            h.close()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    setattr(handler, "_added_by_configure_logging", True)
    logger.addHandler(handler)

    # httpx/httpcore registran cada petición en INFO/DEBUG: solo en modo debug.
    noisy = logging.DEBUG if logger.level <= logging.DEBUG else logging.WARNING
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(noisy)
