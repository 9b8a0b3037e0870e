"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar los servicios.
- Permite que el adaptador HTTP (Contentful) lea config de forma consistente.

Nota:
- Las credenciales (space id / token) NO viven aquí: se pasan al construir el servicio.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central de la librería.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para servicio/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="SUNRISE_CMS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request al backend CMS (segundos).",
    )
    user_agent: str = Field(
        default="sunrise-cms/0.1",
        min_length=1,
        description="User-Agent para peticiones al backend.",
    )

    contentful_host: str = Field(
        default="cdn.contentful.com",
        min_length=1,
        description="Host de la Content Delivery API.",
    )
    contentful_preview_host: str = Field(
        default="preview.contentful.com",
        min_length=1,
        description="Host de la Content Preview API (borradores).",
    )
    preview: bool = Field(
        default=False,
        description="Usar la Preview API en vez de la Delivery API.",
    )
    environment: str = Field(
        default="master",
        min_length=1,
        description="Entorno de Contentful dentro del space.",
    )
    include_depth: int = Field(
        default=10,
        ge=0,
        le=10,
        description="Niveles de links (entries/assets) que el backend resuelve en `includes`.",
    )

    default_locale: str = Field(
        default="en-US",
        min_length=1,
        description="Locale por defecto si ni el constructor ni el backend lo indican.",
    )

    @property
    def contentful_base_url(self) -> str:
        host = self.contentful_preview_host if self.preview else self.contentful_host
        return f"https://{host}"
