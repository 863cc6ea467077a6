"""Codificación de modelos de opciones a query string.

Reglas:
- `None` como opciones: la ruta se devuelve intacta.
- Campos en su valor cero (None, False, 0, "", colección vacía) se omiten.
- Colecciones: un parámetro repetido por elemento (`k=a&k=b`).
- Booleanos: `true`. Enums: su valor.
- Cualquier query previa de la ruta se reemplaza.
"""

from __future__ import annotations

from typing import Any

import httpx

from forge_yourself.core.domain.options import QueryOptions
from forge_yourself.core.errors import EncodingError


def _is_zero(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple)):
        return not value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


def _scalar(name: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise EncodingError(f"Option {name!r} has a value that cannot be sent as a query parameter: {value!r}")


def option_pairs(options: QueryOptions) -> list[tuple[str, str]]:
    """Aplana el modelo a pares (nombre, valor) en orden de declaración."""

    data = options.model_dump(mode="json")
    pairs: list[tuple[str, str]] = []
    for name in type(options).model_fields:
        value = data.get(name)
        if _is_zero(value):
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                pairs.append((name, _scalar(name, item)))
        else:
            pairs.append((name, _scalar(name, value)))
    return pairs


def encode_options(path: str, options: QueryOptions | None) -> str:
    """Devuelve `path` con las opciones codificadas como query string."""

    if options is None:
        return path

    base, _, _ = path.partition("?")
    query = str(httpx.QueryParams(option_pairs(options)))
    if not query:
        return base
    return f"{base}?{query}"


__all__ = ["encode_options", "option_pairs"]
