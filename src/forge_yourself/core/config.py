"""Configuración del cliente Forge.

Por qué aquí:
- Centraliza los valores por defecto (base URL, User-Agent) en un único
  contrato tipado en lugar de constantes globales mutables.
- Permite sobreescribir la configuración con variables de entorno
  (pydantic-settings) o con argumentos explícitos al construir el cliente.

Nota:
- La barra final de `base_url` NO se valida aquí: se comprueba al construir
  cada request (ver `adapters.request_builder`).
"""

from __future__ import annotations

from typing import Final

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL: Final[str] = "https://forgeapi.puppet.com/v3/"
DEFAULT_USER_AGENT: Final[str] = "go-forge-yourself/0.0.0"


class ForgeSettings(BaseSettings):
    """Configuración inmutable de un cliente Forge.

    Orden de precedencia:
    1. Argumentos explícitos (`ForgeSettings(base_url=...)`).
    2. Variables de entorno `FORGE_*`.
    3. Fichero `.env` del directorio de trabajo.
    4. Valores por defecto.
    """

    model_config = SettingsConfigDict(
        env_prefix="FORGE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="URL base de la API; debe terminar en '/'.",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent enviado en cada request (vacío = sin cabecera).",
    )
    api_key: SecretStr | None = Field(
        default=None,
        description="Token Bearer para endpoints autenticados (opcional).",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )

    def bearer_token(self) -> str | None:
        """Devuelve el token en claro, o None si no hay uno configurado."""

        if self.api_key is None:
            return None
        token = self.api_key.get_secret_value()
        return token or None
