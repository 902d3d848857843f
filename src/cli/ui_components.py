"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Una línea por resultado; el color es cosmético.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from core.domain.models import Failure, InvalidFormat, Listing, Outcome, Success

OK_TOKEN = "OK!"
FAIL_TOKEN = ":("
INVALID_FORMAT_MESSAGE = "Invalid JSON format. Expected JSON object."


def build_entry_line(short_name: str, destination: str) -> Text:
    """`<short> -> <destination>` con el short en verde y el destino en amarillo."""

    return Text.assemble((short_name, "green"), " -> ", (destination, "yellow"))


def render_outcome(console: Console, outcome: Outcome) -> None:
    """Imprime un `Outcome` en la consola."""

    if isinstance(outcome, Success):
        console.print(Text(OK_TOKEN), soft_wrap=True)
    elif isinstance(outcome, Failure):
        console.print(Text(FAIL_TOKEN), soft_wrap=True)
    elif isinstance(outcome, InvalidFormat):
        console.print(Text(INVALID_FORMAT_MESSAGE), soft_wrap=True)
    elif isinstance(outcome, Listing):
        for short_name, destination in outcome.entries.items():
            console.print(build_entry_line(short_name, destination), soft_wrap=True)
    else:  # pragma: no cover
        raise TypeError(f"Unsupported outcome: {outcome!r}")
