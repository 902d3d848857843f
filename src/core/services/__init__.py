"""Servicios del Core (orquestación de comandos)."""
