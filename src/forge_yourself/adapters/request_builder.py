"""Construcción de requests hacia la API Forge.

Responsabilidad:
- Resolver la ruta relativa contra la base URL (RFC 3986).
- Añadir las opciones como query string.
- Serializar el cuerpo a JSON UTF-8 sin escapar `<`, `>` ni `&`.
- Fijar Accept, Content-Type, Authorization y User-Agent.

No ejecuta el request: solo produce un `httpx.Request`.
"""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel

from forge_yourself.adapters.query import encode_options
from forge_yourself.core.config import ForgeSettings
from forge_yourself.core.domain.options import QueryOptions
from forge_yourself.core.errors import ConfigurationError, EncodingError


def _encode_body(body: object) -> bytes:
    payload: Any = body
    try:
        if isinstance(body, BaseModel):
            payload = body.model_dump(mode="json", by_alias=True)
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"Could not encode request body as JSON: {exc}") from exc


class RequestBuilder:
    """Construye requests a partir de una configuración inmutable."""

    def __init__(self, settings: ForgeSettings) -> None:
        self._settings = settings

    def build(
        self,
        method: str,
        path: str,
        *,
        body: object | None = None,
        options: QueryOptions | None = None,
    ) -> httpx.Request:
        base_url = self._settings.base_url
        if not urlsplit(base_url).path.endswith("/"):
            raise ConfigurationError(
                f"BaseURL must have a trailing slash, but {base_url!r} does not"
            )

        relative = encode_options(path, options)
        try:
            url = httpx.URL(base_url).join(relative)
        except httpx.InvalidURL as exc:
            raise EncodingError(f"Could not resolve {relative!r} against {base_url!r}: {exc}") from exc

        headers: dict[str, str] = {"Accept": "application/json"}

        content: bytes | None = None
        if body is not None:
            content = _encode_body(body)
            headers["Content-Type"] = "application/json"

        token = self._settings.bearer_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        if self._settings.user_agent:
            headers["User-Agent"] = self._settings.user_agent

        return httpx.Request(method, url, headers=headers, content=content)


__all__ = ["RequestBuilder"]
