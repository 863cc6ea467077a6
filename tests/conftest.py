from __future__ import annotations

import copy
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

import httpx
import pytest

from forge_yourself import ForgeClient

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Keep FORGE_* variables and stray .env files out of every test."""

    for name in ("FORGE_BASE_URL", "FORGE_USER_AGENT", "FORGE_API_KEY", "FORGE_HTTP_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@dataclass
class RecordingTransport:
    """MockTransport wrapper remembering every request it served."""

    handler: Handler
    requests: list[httpx.Request] = field(default_factory=list)

    def _serve(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._serve)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def forge_factory() -> Callable[..., tuple[ForgeClient, RecordingTransport]]:
    def _make(handler: Handler, **client_kwargs: object) -> tuple[ForgeClient, RecordingTransport]:
        recorder = RecordingTransport(handler)
        client = ForgeClient(transport=recorder.transport(), **client_kwargs)  # type: ignore[arg-type]
        return client, recorder

    return _make


@pytest.fixture
def not_found_body() -> dict[str, object]:
    return {"message": "404 Module not found", "errors": ["Module not found"]}


@pytest.fixture
def modules_page() -> dict[str, object]:
    return copy.deepcopy(_MODULES_PAGE)


_MODULES_PAGE: dict[str, object] = {
    "pagination": {
        "limit": 100,
        "offset": 0,
        "first": "/v3/modules?limit=100&offset=0",
        "previous": None,
        "current": "/v3/modules?limit=100&offset=0",
        "next": None,
        "total": 2,
    },
    "results": [
        {
            "uri": "/v3/modules/puppetlabs-stdlib",
            "slug": "puppetlabs-stdlib",
            "name": "stdlib",
            "downloads": 123456789,
            "endorsement": "supported",
            "module_group": "base",
            "premium": False,
            "owner": {"uri": "/v3/users/puppetlabs", "slug": "puppetlabs", "username": "puppetlabs"},
            "current_release": {"slug": "puppetlabs-stdlib-9.6.0", "version": "9.6.0", "tags": ["stdlib"]},
            "releases": [{"slug": "puppetlabs-stdlib-9.6.0", "version": "9.6.0"}],
        },
        {
            "uri": "/v3/modules/puppetlabs-apache",
            "slug": "puppetlabs-apache",
            "name": "apache",
            "endorsement": "supported",
            "superseded_by": None,
        },
    ],
}
