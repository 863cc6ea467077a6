"""Operaciones sobre releases (versiones publicadas de módulos)."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Final

from forge_yourself.adapters.responses import check_response_error, decode_model
from forge_yourself.core.domain.models import ListReleasesResponse, Release
from forge_yourself.core.domain.options import ListReleasesOptions
from forge_yourself.core.interfaces.requester import ForgeRequester

RELEASES_ENDPOINT: Final[str] = "releases"


class ReleasesService:
    """Endpoints de la API relacionados con releases."""

    def __init__(self, requester: ForgeRequester) -> None:
        self._requester = requester

    async def list_releases(self, options: ListReleasesOptions | None = None) -> ListReleasesResponse:
        """Lista releases que cumplen los filtros dados. Resultados paginados."""

        request = self._requester.build_request("GET", RELEASES_ENDPOINT, options=options)
        response = await self._requester.send(request)
        check_response_error(response)
        return decode_model(response, ListReleasesResponse)

    async def iter_releases(self, options: ListReleasesOptions | None = None) -> AsyncIterator[Release]:
        page_options = options or ListReleasesOptions()
        while True:
            page = await self.list_releases(page_options)
            for release in page.results:
                yield release
            if not page.results or not page.pagination.has_next():
                return
            page_options = page_options.model_copy(
                update={"offset": (page_options.offset or 0) + len(page.results)}
            )
