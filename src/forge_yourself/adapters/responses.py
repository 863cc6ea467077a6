"""Decodificación de respuestas de la API Forge.

- `check_response_error`: traduce respuestas con status >= 300 a excepciones.
- `decode_model`: valida un cuerpo JSON contra un modelo del dominio.

Un cuerpo que no es JSON o no tiene la forma esperada produce `DecodeError`,
distinto de `RemoteError` (que lleva el mensaje del servidor).
"""

from __future__ import annotations

from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from forge_yourself.core.domain.models import ErrorResponse
from forge_yourself.core.errors import DecodeError, RemoteError

ModelT = TypeVar("ModelT", bound=BaseModel)


def check_response_error(response: httpx.Response) -> None:
    """Lanza `RemoteError`/`DecodeError` si la respuesta no es exitosa."""

    status = response.status_code
    if status < 300:
        return

    try:
        error = ErrorResponse.model_validate_json(response.content)
    except ValidationError as exc:
        raise DecodeError(
            f"Could not decode error response (HTTP {status}): {exc.errors()[0]['msg']}",
            status_code=status,
        ) from exc

    message = error.message or f"{status} {response.reason_phrase}".strip()
    raise RemoteError(message, status_code=status, errors=error.errors)


def decode_model(response: httpx.Response, model: type[ModelT]) -> ModelT:
    """Decodifica el cuerpo JSON de `response` como `model`."""

    try:
        return model.model_validate_json(response.content)
    except ValidationError as exc:
        raise DecodeError(
            f"Could not decode {model.__name__} from response (HTTP {response.status_code}): {exc}",
            status_code=response.status_code,
        ) from exc


__all__ = ["check_response_error", "decode_model"]
