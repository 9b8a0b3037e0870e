"""Resolución de paths de campo (`pageContent.description`).

Reglas:
- El path se parte por `.`; cada segmento nombra una clave anidada.
- Los valores localizados se resuelven con la `LocalePolicy` en cada nivel
  (links y ficheros de assets también pueden estar localizados).
- Un path vacío, con segmentos vacíos o que no existe devuelve `None`:
  la ausencia de un campo nunca es un error.
"""

from __future__ import annotations

from core.domain.locale import LocalePolicy, unwrap_localized
from core.domain.models import (
    AssetRef,
    EntryNode,
    FieldValue,
    RichText,
    Scalar,
    Structured,
)


def split_path(path: str) -> tuple[str, ...] | None:
    """`"a.b"` -> `("a", "b")`; `None` si el path está mal formado."""

    if not isinstance(path, str) or not path:
        return None
    segments = tuple(path.split("."))
    if any(not segment for segment in segments):
        return None
    return segments


def _child(value: FieldValue, segment: str) -> FieldValue | str | None:
    if isinstance(value, EntryNode):
        return value.fields.get(segment)
    if isinstance(value, Structured):
        return value.values.get(segment)
    if isinstance(value, AssetRef):
        return value.attribute(segment)
    # Scalar / RichText / ListValue no tienen hijos.
    return None


def to_text(value: FieldValue | str | None) -> str | None:
    """Valor terminal -> texto; tipos sin representación textual -> `None`."""

    if isinstance(value, str):
        return value or None
    if isinstance(value, Scalar):
        return value.as_text() or None
    if isinstance(value, AssetRef):
        return value.url or None
    if isinstance(value, RichText):
        return value.as_text() or None
    # EntryNode / Structured / ListValue: no son escalares.
    return None


def resolve_field(
    fields: dict[str, FieldValue],
    path: str,
    policy: LocalePolicy,
) -> str | None:
    """Camina el árbol segmento a segmento y devuelve el texto final (o `None`)."""

    segments = split_path(path)
    if segments is None:
        return None

    head, *rest = segments
    current: FieldValue | str | None = unwrap_localized(fields.get(head), policy)
    for segment in rest:
        if current is None or isinstance(current, str):
            return None
        current = _child(current, segment)
        if not isinstance(current, str):
            current = unwrap_localized(current, policy)

    return to_text(current)
