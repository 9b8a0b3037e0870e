"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras e inmutables (Pydantic v2) y la
  resolución de campos/locales, que es cálculo en memoria sin I/O.
- El dominio no conoce HTTP ni el backend: solo conceptos del contenido.
"""

from core.domain.models import (
    AssetRef,
    ContentEntry,
    EntryNode,
    FieldValue,
    ListValue,
    Localized,
    RichText,
    Scalar,
    SpaceLocales,
    Structured,
)
from core.domain.page import PageEntry

__all__ = [
    "AssetRef",
    "ContentEntry",
    "EntryNode",
    "FieldValue",
    "ListValue",
    "Localized",
    "PageEntry",
    "RichText",
    "Scalar",
    "SpaceLocales",
    "Structured",
]
