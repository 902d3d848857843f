"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- El dispatcher depende del contrato `RedirectBackend`, no de httpx.
"""
