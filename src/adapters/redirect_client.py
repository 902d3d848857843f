"""Cliente HTTP del servidor fallo.

Contrato de red:
- `POST {server_url}/{short}` con el destino como cuerpo.
- `GET {server_url}/` devuelve un objeto JSON `short -> destino`.
- `DELETE {server_url}/{short}`.

Create/delete solo consideran éxito el estado 200. Un fallo de red en
create/delete aborta (`ServerUnreachableError`); en list se degrada a
`Failure`.
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import auth_headers
from core.config import AppSettings
from core.domain.models import Failure, InvalidFormat, Listing, Success
from core.domain.redirect_map import decode_redirect_map
from core.errors import RedirectMapFormatError, ServerUnreachableError
from core.interfaces.redirects import RedirectBackend

logger = logging.getLogger(__name__)


class RedirectClient(RedirectBackend):
    """Implementación de `RedirectBackend` sobre un `httpx.Client`."""

    def __init__(self, settings: AppSettings, client: httpx.Client) -> None:
        self._server_url = settings.server_url
        self._headers = auth_headers(settings)
        self._client = client

    def _url(self, short_name: str = "") -> str:
        return f"{self._server_url}/{short_name}"

    def _send(self, method: str, url: str, *, content: str | None = None) -> httpx.Response:
        logger.debug("%s %s", method, url)
        # UnicodeEncodeError: httpx solo acepta cabeceras ASCII.
        try:
            response = self._client.request(method, url, content=content, headers=self._headers)
        except (httpx.TransportError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            logger.debug("%s %s failed: %r", method, url, exc)
            raise ServerUnreachableError(method, url, exc) from exc
        logger.debug("%s %s -> HTTP %s", method, url, response.status_code)
        return response

    def _status_outcome(self, response: httpx.Response) -> Success | Failure:
        if response.status_code == httpx.codes.OK:
            return Success()
        return Failure(status_code=response.status_code)

    def create(self, *, short_name: str, destination: str) -> Success | Failure:
        response = self._send("POST", self._url(short_name), content=destination)
        return self._status_outcome(response)

    def list(self) -> Listing | Failure | InvalidFormat:
        try:
            response = self._send("GET", self._url())
        except ServerUnreachableError:
            return Failure()

        try:
            entries = decode_redirect_map(response.content)
        except RedirectMapFormatError as exc:
            logger.debug("Unexpected list body (HTTP %s): %s", response.status_code, exc)
            return InvalidFormat()
        return Listing(entries=entries)

    def delete(self, *, short_name: str) -> Success | Failure:
        response = self._send("DELETE", self._url(short_name))
        return self._status_outcome(response)
