"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Comandos y resultados son valores inmutables (`frozen`), creados una vez
  por invocación.
- Las uniones cerradas (`Command`, `Outcome`) permiten despachar con
  `isinstance` sin estados intermedios.

Nota:
- Estos modelos describen *qué* pide el usuario y *qué* devolvió el
  servidor, no *cómo* se hace la petición.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class CreateRedirect(_Frozen):
    """`new <LINK> <SHORT>`: crea `short_name -> destination`."""

    destination: str = Field(
        ...,
        description="URL completa a la que redirige el enlace corto.",
    )
    short_name: str = Field(
        ...,
        description="Segmento de ruta que identifica la redirección.",
    )


class ListRedirects(_Frozen):
    """`list`: sin parámetros."""


class DeleteRedirect(_Frozen):
    """`delete <SHORT>` / `rm <SHORT>`."""

    short_name: str = Field(
        ...,
        description="Segmento de ruta de la redirección a borrar.",
    )


Command = Union[CreateRedirect, ListRedirects, DeleteRedirect]


class Success(_Frozen):
    """El servidor respondió 200 a un create/delete."""


class Failure(_Frozen):
    """Create/delete con estado distinto de 200, o list sin conexión.

    `status_code` solo se usa para logging de depuración; nunca se muestra.
    """

    status_code: int | None = Field(
        default=None,
        description="Estado HTTP recibido, o None si no hubo respuesta.",
    )


class Listing(_Frozen):
    """Resultado de `list`: short name -> destino, en el orden del servidor."""

    entries: dict[str, str] = Field(default_factory=dict)


class InvalidFormat(_Frozen):
    """El cuerpo de `list` no es un objeto JSON."""


Outcome = Union[Success, Failure, Listing, InvalidFormat]
