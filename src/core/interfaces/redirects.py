"""Contrato del backend de redirecciones.

Por qué Protocol:
- El dispatcher depende del contrato, no de httpx; los tests pueden
  sustituir el cliente HTTP por un stub.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Failure, InvalidFormat, Listing, Success


@runtime_checkable
class RedirectBackend(Protocol):
    """Una operación por variante de `Command`, una petición por llamada."""

    def create(self, *, short_name: str, destination: str) -> Success | Failure:
        """Crea `short_name -> destination`.

        Lanza `ServerUnreachableError` si la petición no se pudo enviar.
        """

        ...

    def list(self) -> Listing | Failure | InvalidFormat:
        """Lista todas las redirecciones. Los fallos de red devuelven `Failure`."""

        ...

    def delete(self, *, short_name: str) -> Success | Failure:
        """Borra `short_name`.

        Lanza `ServerUnreachableError` si la petición no se pudo enviar.
        """

        ...
