"""Capa CLI (Typer + Rich) del cliente fallo."""

__version__ = "0.1.0"
