"""Servicios por recurso (módulos, releases).

Cada servicio recibe un `ForgeRequester` explícito y expone un método por
operación REST.
"""

from forge_yourself.adapters.services.modules import ModulesService
from forge_yourself.adapters.services.releases import ReleasesService

__all__ = [
    "ModulesService",
    "ReleasesService",
]
