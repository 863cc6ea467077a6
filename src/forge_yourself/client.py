"""Cliente de la API Forge.

Uso típico::

    async with ForgeClient(api_key="...") as forge:
        page = await forge.modules.list_modules(
            ListModulesOptions(owner="puppetlabs", endorsements=[Endorsement.SUPPORTED], limit=100)
        )

El cliente es dueño de la configuración (inmutable) y de los servicios
`modules` y `releases`; cada operación es un único intercambio HTTP.
"""

from __future__ import annotations

from types import TracebackType

import httpx

from forge_yourself.adapters.http_client import build_async_client
from forge_yourself.adapters.request_builder import RequestBuilder
from forge_yourself.adapters.services import ModulesService, ReleasesService
from forge_yourself.core.config import ForgeSettings
from forge_yourself.core.domain.options import QueryOptions
from forge_yourself.core.errors import ConfigurationError, TransportError
from forge_yourself.core.logging import logger


class ForgeClient:
    """Cliente asíncrono de la API Forge.

    Los argumentos explícitos (`base_url`, `user_agent`, `api_key`) tienen
    prioridad sobre `settings` y sobre las variables de entorno `FORGE_*`.
    `transport` permite inyectar un `httpx.AsyncBaseTransport`; `http_client`
    un `httpx.AsyncClient` completo (que el llamador debe cerrar); ambos a la vez
    son un `ConfigurationError`.
    """

    def __init__(
        self,
        settings: ForgeSettings | None = None,
        *,
        base_url: str | None = None,
        user_agent: str | None = None,
        api_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        overrides: dict[str, object] = {
            key: value
            for key, value in (
                ("base_url", base_url),
                ("user_agent", user_agent),
                ("api_key", api_key),
            )
            if value is not None
        }
        if settings is None:
            settings = ForgeSettings(**overrides)
        elif overrides:
            settings = ForgeSettings(**{**settings.model_dump(), **overrides})

        if http_client is not None and transport is not None:
            raise ConfigurationError("Pass either transport or http_client, not both")

        self._settings = settings
        self._builder = RequestBuilder(settings)

        self._owns_http = http_client is None
        self._http = http_client or build_async_client(settings, transport=transport)

        self.modules = ModulesService(self)
        self.releases = ReleasesService(self)

    @property
    def settings(self) -> ForgeSettings:
        return self._settings

    def build_request(
        self,
        method: str,
        path: str,
        *,
        body: object | None = None,
        options: QueryOptions | None = None,
    ) -> httpx.Request:
        """Construye (sin enviar) un request relativo a la base URL."""

        return self._builder.build(method, path, body=body, options=options)

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Ejecuta un request; los fallos de red se elevan como `TransportError`."""

        logger.debug("%s %s", request.method, request.url)
        try:
            response = await self._http.send(request)
        except httpx.RequestError as exc:
            raise TransportError(f"{request.method} {request.url} failed: {exc}") from exc
        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)
        return response

    async def aclose(self) -> None:
        """Cierra las conexiones del cliente HTTP propio (no del inyectado)."""

        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> ForgeClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__ = ["ForgeClient"]
