"""Rutas relativas de recursos identificados por slug.

El slug se inserta tal cual en la ruta; por eso se rechaza cualquier valor que
pueda resolver fuera de `<endpoint>/`.
"""

from __future__ import annotations

from forge_yourself.core.errors import EncodingError

_FORBIDDEN_SLUG_CHARS = frozenset("/?#")
_DOT_SEGMENTS = frozenset({".", ".."})


def resource_path(endpoint: str, slug: str) -> str:
    """Ruta relativa `<endpoint>/<slug>`; el slug no puede salir del recurso."""

    if not slug or slug in _DOT_SEGMENTS or any(ch in _FORBIDDEN_SLUG_CHARS for ch in slug):
        raise EncodingError(
            f"Invalid slug {slug!r}: must be non-empty, not '.' or '..', and contain no '/', '?' or '#'"
        )
    return f"{endpoint}/{slug}"
