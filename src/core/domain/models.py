"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y modelos inmutables (`frozen`) sin acoplar
  el Core a librerías de I/O.
- El árbol de campos de un entry es heterogéneo; cada variante es un modelo
  propio y los resolvers distinguen por tipo.

Nota:
- Estos modelos describen *qué* es el contenido, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Scalar(_FrozenModel):
    """Valor plano sin variación por locale (texto, número, booleano)."""

    value: str | int | float | bool

    def as_text(self) -> str:
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        return str(self.value)


class Localized(_FrozenModel):
    """Valor por locale: `{"de-DE": ..., "en": ...}`."""

    values: dict[str, "FieldValue"] = Field(default_factory=dict)


class AssetRef(_FrozenModel):
    """Referencia a un asset multimedia (imagen, documento...)."""

    url: str = Field(..., description="URL del fichero tal como la entrega el backend.")
    title: str | None = None
    file_name: str | None = None
    content_type: str | None = None

    def attribute(self, name: str) -> str | None:
        """Atributos direccionables con un segmento de path (`image.title`)."""

        return {
            "url": self.url,
            "title": self.title,
            "fileName": self.file_name,
            "contentType": self.content_type,
        }.get(name)


class EntryNode(_FrozenModel):
    """Entry enlazado dentro de otro entry (link ya resuelto)."""

    id: str | None = None
    content_type: str | None = None
    fields: dict[str, "FieldValue"] = Field(default_factory=dict)


class Structured(_FrozenModel):
    """Objeto JSON arbitrario (campos Object/Location)."""

    values: dict[str, "FieldValue"] = Field(default_factory=dict)


class RichText(_FrozenModel):
    """Documento de texto enriquecido (árbol de nodos)."""

    document: dict[str, Any] = Field(default_factory=dict)

    def as_text(self) -> str:
        blocks = [_plain_text(node) for node in self.document.get("content") or []]
        return "\n\n".join(block for block in blocks if block)


class ListValue(_FrozenModel):
    items: list["FieldValue"] = Field(default_factory=list)


FieldValue = Union[Scalar, Localized, AssetRef, EntryNode, Structured, RichText, ListValue]

Localized.model_rebuild()
EntryNode.model_rebuild()
Structured.model_rebuild()
ListValue.model_rebuild()


class ContentEntry(_FrozenModel):
    """Árbol de campos crudo de un entry tal como lo devolvió el backend.

    Por qué existe:
    - Es el resultado de "buscar un entry por tipo + campo", independiente del
      backend concreto (Contentful u otro).
    """

    id: str = Field(..., min_length=1, description="Id del entry en el backend.")
    content_type: str = Field(..., min_length=1, description="Tipo de contenido del entry.")
    fields: dict[str, FieldValue] = Field(default_factory=dict)


class SpaceLocales(_FrozenModel):
    """Locales configurados en el backend (space).

    Por qué existe:
    - El locale por defecto y el conjunto de locales válidos son propiedad del
      space, no de cada entry: un entry sin traducir a `en` no hace que `en`
      deje de ser un locale configurado.
    """

    default: str = Field(..., min_length=1, description="Locale por defecto del space.")
    codes: frozenset[str] = Field(
        default_factory=frozenset,
        description="Todos los códigos de locale del space (incluye el por defecto).",
    )


def _plain_text(node: Any) -> str:
    if not isinstance(node, dict):
        return ""
    if node.get("nodeType") == "text":
        value = node.get("value")
        return value if isinstance(value, str) else ""
    return "".join(_plain_text(child) for child in node.get("content") or [])
