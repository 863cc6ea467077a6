"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Los registros reflejan la forma del JSON de la API y se validan en el borde,
  así un cambio de forma se detecta como `DecodeError` y no como un
  `KeyError` lejos del origen.
- Todos los campos son opcionales: un campo ausente se decodifica a su valor
  cero (None para escalares, lista vacía para colecciones).
- Los campos enumerados aceptan valores desconocidos como `str` crudo.

Nota:
- Estos modelos describen *qué* devuelve la API, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, Field
from pydantic.config import ConfigDict

from forge_yourself.core.domain.enums import Endorsement, ModuleGroup


def _none_as_empty_list(value: object) -> object:
    return [] if value is None else value


def _none_as_empty_dict(value: object) -> object:
    return {} if value is None else value


StrList = Annotated[list[str], BeforeValidator(_none_as_empty_list)]
ObjectList = Annotated[list[dict[str, Any]], BeforeValidator(_none_as_empty_list)]


class ForgeRecord(BaseModel):
    """Base común: ignora claves desconocidas del JSON."""

    model_config = ConfigDict(extra="ignore")


class ErrorResponse(ForgeRecord):
    """Cuerpo de error devuelto por la API (`{message, errors[]}`)."""

    message: str | None = Field(
        default=None,
        description="Mensaje principal, p.ej. '404 Module not found'.",
    )
    errors: StrList = Field(
        default_factory=list,
        description="Detalle de errores individuales.",
    )


class Pagination(ForgeRecord):
    """Información de paginación incluida en las respuestas de listado.

    Los enlaces son rutas relativas al host (p.ej. `/v3/modules?offset=20`).
    """

    limit: int | None = None
    offset: int | None = None
    first: str | None = None
    prev: str | None = Field(
        default=None,
        validation_alias=AliasChoices("previous", "prev"),
    )
    current: str | None = None
    next: str | None = None
    total: int | None = None

    def has_next(self) -> bool:
        """True si existe otra página (el enlace `next` no está vacío)."""

        return bool(self.next)


class Owner(ForgeRecord):
    """Usuario propietario de un módulo."""

    uri: str | None = None
    slug: str | None = None
    username: str | None = None
    gravatar_id: str | None = None


class ModuleReference(ForgeRecord):
    """Referencia abreviada a otro módulo (p.ej. `superseded_by`)."""

    uri: str | None = None
    slug: str | None = None


class ReleaseSummary(ForgeRecord):
    """Versión abreviada de un release, tal como aparece en `Module.releases`."""

    uri: str | None = None
    slug: str | None = None
    version: str | None = None
    supported: bool | None = None
    created_at: str | None = None
    deleted_at: str | None = None
    file_uri: str | None = None
    file_size: int | None = None


class Module(ForgeRecord):
    """Entidad módulo de la API Forge."""

    uri: str | None = None
    slug: str | None = Field(
        default=None,
        description="Identificador único '<owner>-<name>'.",
    )
    name: str | None = None
    downloads: int | None = None
    created_at: str | None = None
    updated_at: str | None = None
    deprecated_at: str | None = None
    deprecated_for: str | None = None
    superseded_by: ModuleReference | None = None
    endorsement: Endorsement | str | None = Field(
        default=None,
        union_mode="left_to_right",
        description="Programa de respaldo; None si el módulo no está respaldado.",
    )
    module_group: ModuleGroup | str | None = Field(default=None, union_mode="left_to_right")
    premium: bool | None = None
    owner: Owner | None = None
    current_release: Release | None = None
    releases: Annotated[list[ReleaseSummary], BeforeValidator(_none_as_empty_list)] = Field(
        default_factory=list,
    )
    feedback_score: int | None = None
    homepage_url: str | None = None
    issues_url: str | None = None


class Release(ForgeRecord):
    """Entidad release (versión publicada de un módulo)."""

    uri: str | None = None
    slug: str | None = Field(
        default=None,
        description="Identificador único '<owner>-<name>-<version>'.",
    )
    module: Module | None = None
    version: str | None = None
    metadata: dict[str, Any] | None = Field(
        default=None,
        description="Contenido de metadata.json del release.",
    )
    tags: StrList = Field(default_factory=list)
    supported: bool | None = None
    pdk: bool | None = None
    validation_score: int | None = None
    file_uri: str | None = None
    file_size: int | None = None
    file_md5: str | None = None
    file_sha256: str | None = None
    downloads: int | None = None
    readme: str | None = None
    changelog: str | None = None
    license: str | None = None
    reference: str | None = None
    pe_compatibility: StrList = Field(default_factory=list)
    tasks: ObjectList = Field(default_factory=list)
    plans: ObjectList = Field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None
    deleted_at: str | None = None
    deleted_for: str | None = None


class ListModulesResponse(ForgeRecord):
    """Respuesta de `GET modules`."""

    pagination: Annotated[Pagination, BeforeValidator(_none_as_empty_dict)] = Field(
        default_factory=Pagination,
    )
    results: Annotated[list[Module], BeforeValidator(_none_as_empty_list)] = Field(
        default_factory=list,
    )


class ListReleasesResponse(ForgeRecord):
    """Respuesta de `GET releases`."""

    pagination: Annotated[Pagination, BeforeValidator(_none_as_empty_dict)] = Field(
        default_factory=Pagination,
    )
    results: Annotated[list[Release], BeforeValidator(_none_as_empty_list)] = Field(
        default_factory=list,
    )


# `Module` y `Release` se referencian mutuamente.
Module.model_rebuild()
Release.model_rebuild()
ListModulesResponse.model_rebuild()
ListReleasesResponse.model_rebuild()
