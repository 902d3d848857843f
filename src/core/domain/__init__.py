"""Modelos del dominio.

Por qué:
- Comandos, resultados y el decodificador del mapa de redirecciones viven
  aquí como valores puros (Pydantic v2).
- El dominio no conoce HTTP ni la CLI.
"""
