"""Taxonomía de errores del cliente Forge.

Todas las excepciones heredan de `ForgeError`, así quien llama puede capturar
cualquier fallo de la librería con una sola cláusula y, si lo necesita,
distinguir la causa por subclase.
"""

from __future__ import annotations


class ForgeError(Exception):
    """Base de todos los errores emitidos por la librería."""


class ConfigurationError(ForgeError):
    """Configuración inválida (p.ej. base URL sin barra final)."""


class EncodingError(ForgeError):
    """No se pudo serializar opciones, slug o cuerpo del request."""


class TransportError(ForgeError):
    """Fallo de red, conexión o timeout durante el intercambio HTTP."""


class RemoteError(ForgeError):
    """Respuesta no-2xx de la API con un mensaje de error.

    `str(error)` es exactamente el mensaje devuelto por el servidor.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        errors: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors: list[str] = list(errors or [])


class DecodeError(ForgeError):
    """El cuerpo de la respuesta no tiene la forma esperada."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "ConfigurationError",
    "DecodeError",
    "EncodingError",
    "ForgeError",
    "RemoteError",
    "TransportError",
]
