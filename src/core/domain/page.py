"""Página CMS resuelta (`PageEntry`).

Por qué un modelo separado de `ContentEntry`:
- `ContentEntry` es el árbol crudo del backend; `PageEntry` le añade el contexto
  de locale con el que se pidió (locales solicitados + locale por defecto).
- Es inmutable: para la misma entrada, `field(path)` siempre responde lo mismo.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.field_path import resolve_field
from core.domain.locale import (
    LocalePolicy,
    collect_locales,
    normalize_locale,
    normalize_locales,
)
from core.domain.models import ContentEntry


class PageEntry(BaseModel):
    """Entry de página con acceso a campos por path y fallback de locale."""

    model_config = ConfigDict(frozen=True)

    entry: ContentEntry = Field(
        ...,
        description="Árbol de campos crudo devuelto por el backend.",
    )
    default_locale: str = Field(
        ...,
        min_length=1,
        description="Locale por defecto (último recurso en el fallback).",
    )
    locales: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Locales solicitados en orden de preferencia (nunca vacío).",
    )
    known_locales: frozenset[str] = Field(
        default_factory=frozenset,
        description="Locales configurados en el backend para este entry.",
    )

    @classmethod
    def build(
        cls,
        *,
        entry: ContentEntry,
        locales: Sequence[str] | None,
        default_locale: str,
        known_locales: Iterable[str] | None = None,
    ) -> "PageEntry":
        """Construye la página normalizando locales.

        - `None` y `[]` equivalen a "solo el locale por defecto".
        - Sin `known_locales` (backend que no lista locales) se usan los que
          aparecen en el árbol, como último recurso.
        """

        default = normalize_locale(default_locale)
        requested = normalize_locales(locales) or (default,)
        known = collect_locales(entry) if known_locales is None else known_locales
        return cls(
            entry=entry,
            default_locale=default,
            locales=requested,
            known_locales=frozenset({default, *(normalize_locale(tag) for tag in known)}),
        )

    @property
    def id(self) -> str:
        return self.entry.id

    def _policy(self) -> LocalePolicy:
        return LocalePolicy(
            requested=self.locales,
            default=self.default_locale,
            known=self.known_locales,
        )

    def serves_requested_locales(self) -> bool:
        """`False` si se pidieron locales y ninguno está configurado."""

        return bool(self._policy().candidates())

    def field(self, path: str) -> str | None:
        """Valor del campo en `path`, o `None` si no existe para los locales aplicables."""

        return resolve_field(self.entry.fields, path, self._policy())

    def field_or_empty(self, path: str) -> str:
        value = self.field(path)
        return value if value is not None else ""
