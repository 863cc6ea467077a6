"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y redirecciones para todo el cliente.
- Facilita testeo: el transporte se inyecta (p.ej. `httpx.MockTransport`).

Nota: las cabeceras (User-Agent, Authorization) NO se fijan aquí sino en cada
request (ver `adapters.request_builder`), así un request construido lleva
exactamente las cabeceras configuradas.
"""

from __future__ import annotations

import httpx

from forge_yourself.core.config import ForgeSettings


def build_async_client(
    settings: ForgeSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza el timeout para que todas las operaciones se comporten igual.
    - `transport` permite sustituir la red por un stub en tests.
    """

    settings = settings or ForgeSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        transport=transport,
    )
