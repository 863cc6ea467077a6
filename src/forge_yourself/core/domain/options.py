"""Modelos de opciones y parámetros de cada operación.

Reglas de diseño:
- El nombre de cada campo ES el nombre del parámetro externo (query string o
  cuerpo JSON), así el codificador no necesita tablas de traducción.
- El valor por defecto de cada campo es su valor cero (None, False, lista
  vacía); los campos en su valor cero no se envían.
- `extra="forbid"`: las opciones desconocidas se rechazan al construir el modelo.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from forge_yourself.core.domain.enums import (
    Endorsement,
    ModuleGroup,
    ReleaseSortOption,
    SortOption,
)


class QueryOptions(BaseModel):
    """Base de los modelos que se codifican como query string."""

    model_config = ConfigDict(extra="forbid")


class ListModulesOptions(QueryOptions):
    """Opciones de `GET modules`."""

    limit: int | None = Field(default=None, ge=0)
    offset: int | None = Field(default=None, ge=0)
    sort_by: SortOption | None = None
    tag: str | None = None
    owner: str | None = None
    with_tasks: bool = False
    with_plans: bool = False
    with_pdk: bool = False
    premium: bool = False
    exclude_premium: bool = False
    endorsements: list[Endorsement] = Field(default_factory=list)
    operating_system: str | None = None
    operating_system_release: str | None = None
    pe_requirement: str | None = None
    puppet_requirement: str | None = None
    with_minimum_score: int | None = None
    module_groups: list[ModuleGroup] = Field(default_factory=list)
    show_deleted: bool = False
    hide_deprecated: bool = False
    only_latest: bool = False
    slugs: list[str] = Field(default_factory=list)
    with_html: bool = False
    include_fields: list[str] = Field(default_factory=list)
    exclude_fields: list[str] = Field(default_factory=list)
    starts_with: str | None = None
    with_release_since: str | None = None


class GetModuleOptions(QueryOptions):
    """Opciones de `GET modules/{slug}`."""

    with_html: bool = False
    include_fields: list[str] = Field(default_factory=list)
    exclude_fields: list[str] = Field(default_factory=list)


class ListReleasesOptions(QueryOptions):
    """Opciones de `GET releases`."""

    limit: int | None = Field(default=None, ge=0)
    offset: int | None = Field(default=None, ge=0)
    sort_by: ReleaseSortOption | None = None
    module: str | None = None
    owner: str | None = None
    with_pdk: bool = False
    operating_system: str | None = None
    operating_system_release: str | None = None
    pe_requirement: str | None = None
    puppet_requirement: str | None = None
    module_groups: list[ModuleGroup] = Field(default_factory=list)
    show_deleted: bool = False
    hide_deprecated: bool = False
    with_html: bool = False
    include_fields: list[str] = Field(default_factory=list)
    exclude_fields: list[str] = Field(default_factory=list)


class DeleteModuleParams(QueryOptions):
    """Parámetros de `DELETE modules/{slug}`."""

    reason: str | None = Field(
        default=None,
        description="Motivo del borrado (soft delete).",
    )


class DeprecateModuleParams(BaseModel):
    """Parámetros de deprecación; se envían siempre, aunque estén vacíos."""

    model_config = ConfigDict(extra="forbid")

    reason: str = Field(default="", description="Motivo de la deprecación.")
    replacement_slug: str = Field(
        default="",
        description="Slug del módulo sustituto (acepta nombres legacy).",
    )


class DeprecateModuleBody(BaseModel):
    """Cuerpo del `PATCH modules/{slug}`."""

    action: str = "delete"
    params: DeprecateModuleParams = Field(default_factory=DeprecateModuleParams)


__all__ = [
    "DeleteModuleParams",
    "DeprecateModuleBody",
    "DeprecateModuleParams",
    "GetModuleOptions",
    "ListModulesOptions",
    "ListReleasesOptions",
    "QueryOptions",
]
