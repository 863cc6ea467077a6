"""Núcleo del cliente: configuración, errores, logging y dominio.

Por qué:
- Aquí no se hace I/O; los adaptadores HTTP dependen del núcleo y no al revés.
"""
