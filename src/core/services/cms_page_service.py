"""Servicio de páginas CMS.

Por qué aquí:
- Es el único punto con I/O del flujo: los locales del space (una vez, en la
  primera llamada) y una query por `page()`. Todo lo demás (fallback de
  locale, paths de campo) ocurre en memoria sobre el `PageEntry` inmutable.

Política de errores:
- "ningún entry coincide" es un resultado normal y devuelve `None`;
- pedir solo locales que el space no tiene configurados también devuelve `None`;
- cualquier fallo del backend se registra una vez y se relanza como
  `CmsServiceError`, encadenado a la excepción original.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Sequence

from core.config import AppSettings
from core.domain.models import SpaceLocales
from core.domain.page import PageEntry
from core.errors import CmsServiceError
from core.interfaces.content_backend import ContentBackend

logger = logging.getLogger(__name__)


class CmsPageService:
    """Obtiene páginas de un tipo de contenido, identificadas por uno de sus campos."""

    def __init__(
        self,
        *,
        backend: ContentBackend,
        page_type_name: str,
        page_type_id_field_name: str,
        default_locale: str | None = None,
        space_locales: Iterable[str] | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        if not page_type_name:
            raise ValueError("page_type_name is required")
        if not page_type_id_field_name:
            raise ValueError("page_type_id_field_name is required")

        self._settings = settings or AppSettings()
        self._backend = backend
        self._page_type_name = page_type_name
        self._page_type_id_field_name = page_type_id_field_name
        self._default_locale = default_locale
        self._space_locales = tuple(space_locales) if space_locales is not None else None

        self._space: SpaceLocales | None = None
        self._space_loaded = self._default_locale is not None and self._space_locales is not None
        self._space_lock = asyncio.Lock()

    async def _load_space(self) -> SpaceLocales | None:
        """Locales del space, pedidos al backend una sola vez (si hace falta)."""

        if self._space_loaded:
            return self._space
        async with self._space_lock:
            if not self._space_loaded:
                self._space = await self._backend.fetch_locales()
                self._space_loaded = True
        return self._space

    def _locale_config(self, space: SpaceLocales | None) -> tuple[str, Iterable[str] | None]:
        """(locale por defecto, locales conocidos).

        Argumentos explícitos > space del backend > `AppSettings.default_locale`.
        Sin locales conocidos, `PageEntry` usa los que aparecen en el entry.
        """

        default = self._default_locale or (space.default if space else None) or self._settings.default_locale
        known: Iterable[str] | None = self._space_locales
        if known is None and space is not None:
            known = space.codes
        return default, known

    async def page(
        self,
        page_id: str,
        locales: Sequence[str] | None = None,
    ) -> PageEntry | None:
        """Obtiene la página identificada por `page_id`.

        `locales` es el orden de preferencia; `None` y `[]` equivalen a
        "solo el locale por defecto".
        """

        logger.debug(
            "cms_page_fetch_started",
            extra={
                "page_id": page_id,
                "content_type": self._page_type_name,
                "id_field": self._page_type_id_field_name,
            },
        )
        try:
            space = await self._load_space()
            entry = await self._backend.fetch_entry(
                content_type=self._page_type_name,
                field_name=self._page_type_id_field_name,
                value=page_id,
            )
        except Exception as exc:
            logger.warning(
                "cms_page_fetch_failed",
                extra={
                    "page_id": page_id,
                    "content_type": self._page_type_name,
                    "error": str(exc),
                    "error_type": type(exc).__name__,
                },
            )
            raise CmsServiceError(page_id) from exc

        if entry is None:
            logger.info(
                "cms_page_not_found",
                extra={"page_id": page_id, "content_type": self._page_type_name},
            )
            return None

        default_locale, known_locales = self._locale_config(space)
        page = PageEntry.build(
            entry=entry,
            locales=locales,
            default_locale=default_locale,
            known_locales=known_locales,
        )
        if not page.serves_requested_locales():
            logger.info(
                "cms_page_locales_not_configured",
                extra={"page_id": page_id, "locales": list(page.locales)},
            )
            return None
        return page
