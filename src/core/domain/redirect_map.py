"""Decodificación del cuerpo de `GET /` a un mapa de redirecciones.

Por qué un decodificador tipado:
- El resto del código recibe `dict[str, str]` o `RedirectMapFormatError`,
  nunca un valor JSON genérico que haya que inspeccionar.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import TypeAdapter, ValidationError

from core.errors import RedirectMapFormatError

_OBJECT = TypeAdapter(dict[str, Any])


def _render_value(value: Any) -> str:
    # Los strings JSON pierden las comillas; números, listas, etc. quedan en JSON.
    return json.dumps(value, ensure_ascii=False, separators=(",", ":")).strip('"')


def decode_redirect_map(body: str | bytes) -> dict[str, str]:
    """Decodifica un objeto JSON a `short_name -> destino`.

    Lanza `RedirectMapFormatError` si el cuerpo no es JSON válido o si es
    JSON pero no un objeto (p.ej. `[1, 2, 3]`). Se conserva el orden de claves.
    """

    try:
        raw = _OBJECT.validate_json(body)
    except ValidationError as exc:
        raise RedirectMapFormatError(str(exc)) from exc
    return {short: _render_value(destination) for short, destination in raw.items()}
