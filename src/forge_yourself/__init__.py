"""Cliente tipado y asíncrono para la API del registro de módulos Puppet Forge."""

from __future__ import annotations

from forge_yourself.client import ForgeClient
from forge_yourself.core.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, ForgeSettings
from forge_yourself.core.domain.enums import Endorsement, ModuleGroup, ReleaseSortOption, SortOption
from forge_yourself.core.domain.models import (
    ErrorResponse,
    ListModulesResponse,
    ListReleasesResponse,
    Module,
    Owner,
    Pagination,
    Release,
)
from forge_yourself.core.domain.options import (
    DeleteModuleParams,
    DeprecateModuleParams,
    GetModuleOptions,
    ListModulesOptions,
    ListReleasesOptions,
)
from forge_yourself.core.errors import (
    ConfigurationError,
    DecodeError,
    EncodingError,
    ForgeError,
    RemoteError,
    TransportError,
)
from forge_yourself.core.logging import setup_logger

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "ConfigurationError",
    "DecodeError",
    "DeleteModuleParams",
    "DeprecateModuleParams",
    "EncodingError",
    "Endorsement",
    "ErrorResponse",
    "ForgeClient",
    "ForgeError",
    "ForgeSettings",
    "GetModuleOptions",
    "ListModulesOptions",
    "ListModulesResponse",
    "ListReleasesOptions",
    "ListReleasesResponse",
    "Module",
    "ModuleGroup",
    "Owner",
    "Pagination",
    "Release",
    "ReleaseSortOption",
    "RemoteError",
    "SortOption",
    "TransportError",
    "setup_logger",
]
