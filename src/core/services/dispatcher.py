"""Despacho de comandos.

Por qué un servicio aparte:
- Convierte un `Command` en exactamente una llamada a `RedirectBackend`.
- El render y los códigos de salida se quedan en la CLI; aquí basta un stub
  del backend para testear.
"""

from __future__ import annotations

import logging

from core.domain.models import (
    Command,
    CreateRedirect,
    DeleteRedirect,
    ListRedirects,
    Outcome,
)
from core.interfaces.redirects import RedirectBackend

logger = logging.getLogger(__name__)


def dispatch(command: Command, backend: RedirectBackend) -> Outcome:
    """Ejecuta `command` contra `backend` y devuelve el `Outcome`.

    `ServerUnreachableError` de create/delete se propaga al llamador.
    """

    if isinstance(command, CreateRedirect):
        outcome: Outcome = backend.create(
            short_name=command.short_name,
            destination=command.destination,
        )
    elif isinstance(command, ListRedirects):
        outcome = backend.list()
    elif isinstance(command, DeleteRedirect):
        outcome = backend.delete(short_name=command.short_name)
    else:  # pragma: no cover
        raise TypeError(f"Unsupported command: {command!r}")

    logger.debug("%s -> %r", type(command).__name__, outcome)
    return outcome
