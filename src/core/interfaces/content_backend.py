"""Contrato del backend de contenidos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el backend (Contentful, un stub en tests...) sea intercambiable
  sin acoplar el servicio de páginas a un cliente HTTP concreto.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ContentEntry, SpaceLocales


@runtime_checkable
class ContentBackend(Protocol):
    """Contrato mínimo: buscar un entry por tipo + igualdad de campo.

    Reglas de diseño:
    - `fetch_entry` es asíncrono porque hace I/O (HTTP).
    - Devuelve `None` si no hay coincidencias; cualquier fallo se propaga
      como excepción (el servicio la envuelve).
    - `fetch_locales` devuelve los locales del space; `None` si el backend no
      sabe listarlos (el servicio cae entonces a los locales del entry).
    """

    async def fetch_entry(
        self,
        *,
        content_type: str,
        field_name: str,
        value: str,
    ) -> ContentEntry | None:
        """Devuelve el primer entry de `content_type` con `fields[field_name] == value`."""

        ...

    async def fetch_locales(self) -> SpaceLocales | None:
        """Devuelve el locale por defecto y los códigos configurados en el space."""

        ...
