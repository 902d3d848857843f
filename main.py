"""Entry point de desarrollo (sin `pip install -e .`).

Uso: `python main.py list`. Equivale al script `fallo`; solo añade `src/`
al path porque el código no está instalado.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parent / "src"


if __name__ == "__main__":
    if str(SRC) not in sys.path:
        sys.path.insert(0, str(SRC))

    from cli.main import app  # noqa: PLC0415

    app(prog_name="fallo")
