"""Operaciones sobre módulos: listar, obtener, borrar y deprecar.

Endpoints (relativos a la base URL):
- `GET modules`
- `GET modules/{slug}`
- `DELETE modules/{slug}`
- `PATCH modules/{slug}` (deprecación)
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Final

from forge_yourself.adapters.responses import check_response_error, decode_model
from forge_yourself.adapters.services._paths import resource_path
from forge_yourself.core.domain.models import ListModulesResponse, Module
from forge_yourself.core.domain.options import (
    DeleteModuleParams,
    DeprecateModuleBody,
    DeprecateModuleParams,
    GetModuleOptions,
    ListModulesOptions,
)
from forge_yourself.core.interfaces.requester import ForgeRequester

MODULES_ENDPOINT: Final[str] = "modules"


class ModulesService:
    """Endpoints de la API relacionados con módulos."""

    def __init__(self, requester: ForgeRequester) -> None:
        self._requester = requester

    async def list_modules(self, options: ListModulesOptions | None = None) -> ListModulesResponse:
        """Lista módulos; el resultado se controla con `ListModulesOptions`.

        https://forgeapi.puppet.com/#operation/getModules
        """

        request = self._requester.build_request("GET", MODULES_ENDPOINT, options=options)
        response = await self._requester.send(request)
        check_response_error(response)
        return decode_model(response, ListModulesResponse)

    async def iter_modules(self, options: ListModulesOptions | None = None) -> AsyncIterator[Module]:
        """Recorre todas las páginas de `list_modules`, una request por página."""

        page_options = options or ListModulesOptions()
        while True:
            page = await self.list_modules(page_options)
            for module in page.results:
                yield module
            if not page.results or not page.pagination.has_next():
                return
            page_options = page_options.model_copy(
                update={"offset": (page_options.offset or 0) + len(page.results)}
            )

    async def get_module(self, slug: str, options: GetModuleOptions | None = None) -> Module:
        """Obtiene un módulo por slug.

        https://forgeapi.puppet.com/#operation/getModule
        """

        path = resource_path(MODULES_ENDPOINT, slug)
        request = self._requester.build_request("GET", path, options=options)
        response = await self._requester.send(request)
        check_response_error(response)
        return decode_model(response, Module)

    async def delete_module(self, slug: str, params: DeleteModuleParams | None = None) -> None:
        """Soft delete de un módulo. Éxito = 204.

        https://forgeapi.puppet.com/#operation/deleteModule
        """

        path = resource_path(MODULES_ENDPOINT, slug)
        request = self._requester.build_request("DELETE", path, options=params or DeleteModuleParams())
        response = await self._requester.send(request)
        if response.status_code != 204:
            check_response_error(response)

    async def deprecate_module(self, slug: str, params: DeprecateModuleParams | None = None) -> None:
        """Marca un módulo como deprecado. Éxito = 204.

        https://forgeapi.puppet.com/#tag/Module-Operations/operation/deprecateModule
        """

        path = resource_path(MODULES_ENDPOINT, slug)
        body = DeprecateModuleBody(params=params or DeprecateModuleParams())
        request = self._requester.build_request("PATCH", path, body=body)
        response = await self._requester.send(request)
        if response.status_code != 204:
            check_response_error(response)
