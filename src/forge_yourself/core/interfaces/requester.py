"""Contrato entre los servicios de recursos y el cliente.

Por qué Protocol:
- Cada servicio guarda una referencia explícita a quien construye y envía
  requests, sin heredar de una base compartida.
- En tests se puede sustituir por cualquier objeto con la misma forma.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from forge_yourself.core.domain.options import QueryOptions

if TYPE_CHECKING:
    import httpx


@runtime_checkable
class ForgeRequester(Protocol):
    """Contrato mínimo que necesita un servicio de recursos.

    Reglas de diseño:
    - `build_request` no hace I/O y falla antes de tocar la red.
    - `send` es asíncrono y ejecuta exactamente un intercambio HTTP.
    """

    def build_request(
        self,
        method: str,
        path: str,
        *,
        body: object | None = None,
        options: QueryOptions | None = None,
    ) -> httpx.Request:
        ...

    async def send(self, request: httpx.Request) -> httpx.Response:
        ...
