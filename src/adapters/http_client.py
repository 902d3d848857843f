"""Wrapper de httpx.

Por qué un wrapper:
- Un único sitio donde se crea el `httpx.Client` y se define la cabecera
  de autenticación.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings

API_KEY_HEADER = "x-api-key"


def auth_headers(settings: AppSettings) -> dict[str, str]:
    """Cabeceras de cada petición al servidor fallo.

    Se envían por petición y no en el cliente: httpx codifica las cabeceras
    en ASCII al construirlas, y una clave no ASCII tiene que fallar al
    enviar, no al crear el cliente.
    """

    return {API_KEY_HEADER: settings.api_key}


def build_client(*, transport: httpx.BaseTransport | None = None) -> httpx.Client:
    """Crea el `httpx.Client` de la invocación.

    Sin timeout propio ni reintentos: se usan los defaults de httpx.
    """

    return httpx.Client(transport=transport)
