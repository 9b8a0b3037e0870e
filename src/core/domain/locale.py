"""Locales y política de fallback.

Por qué en el dominio:
- Decide qué locale se lee de un campo localizado; el modelo de página y el
  resolver de paths comparten una única política sin conocer el backend.

Orden de preferencia:
- Locales pedidos (en el orden del llamador) y, al final, el locale por defecto.
- Los locales pedidos que el space no tiene configurados se descartan; si solo
  se pidieron locales no configurados, no hay candidatos.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from core.domain.models import (
    AssetRef,
    ContentEntry,
    EntryNode,
    FieldValue,
    ListValue,
    Localized,
    Scalar,
    Structured,
)


def normalize_locale(tag: str) -> str:
    """`de_DE` -> `de-DE` (se conserva el caso; las comparaciones lo ignoran)."""

    return tag.strip().replace("_", "-")


def _key(tag: str) -> str:
    return normalize_locale(tag).casefold()


def normalize_locales(locales: Iterable[str] | None) -> tuple[str, ...]:
    """Normaliza la lista pedida; `None` y `[]` quedan como `()`."""

    out: list[str] = []
    seen: set[str] = set()
    for tag in locales or ():
        if not isinstance(tag, str) or not tag.strip():
            continue
        key = _key(tag)
        if key in seen:
            continue
        seen.add(key)
        out.append(normalize_locale(tag))
    return tuple(out)


def collect_locales(entry: ContentEntry) -> frozenset[str]:
    """Todas las claves de locale que aparecen en el árbol del entry."""

    found: set[str] = set()
    stack: list[FieldValue] = list(entry.fields.values())
    while stack:
        value = stack.pop()
        if isinstance(value, Localized):
            found.update(normalize_locale(tag) for tag in value.values)
            stack.extend(value.values.values())
        elif isinstance(value, EntryNode):
            stack.extend(value.fields.values())
        elif isinstance(value, Structured):
            stack.extend(value.values.values())
        elif isinstance(value, ListValue):
            stack.extend(value.items)
    return frozenset(found)


def has_content(value: FieldValue | None) -> bool:
    if value is None:
        return False
    if isinstance(value, Scalar):
        return value.as_text() != ""
    if isinstance(value, AssetRef):
        return bool(value.url)
    return True


@dataclass(frozen=True)
class LocalePolicy:
    """Fallback de locale de una página: primero los pedidos, al final el por defecto."""

    requested: tuple[str, ...]
    default: str
    known: frozenset[str] = frozenset()

    def candidates(self) -> tuple[str, ...]:
        """Locales a probar, en orden.

        Vacío si se pidieron locales y ninguno está configurado.
        """

        if not self.requested:
            return (self.default,)

        known = {_key(tag) for tag in self.known} | {_key(self.default)}
        configured = [tag for tag in self.requested if _key(tag) in known]
        if not configured:
            return ()

        out = list(configured)
        if _key(self.default) not in {_key(tag) for tag in out}:
            out.append(self.default)
        return tuple(out)

    def select(self, value: Localized) -> FieldValue | None:
        """Primer locale candidato con un valor presente y no vacío."""

        by_key = {_key(tag): v for tag, v in value.values.items()}
        for tag in self.candidates():
            candidate = unwrap_localized(by_key.get(_key(tag)), self)
            if has_content(candidate):
                return candidate
        return None


def unwrap_localized(value: FieldValue | None, policy: LocalePolicy) -> FieldValue | None:
    """Desenvuelve capas `Localized` hasta llegar a un valor no localizado."""

    while isinstance(value, Localized):
        value = policy.select(value)
    return value


def build_policy(
    *,
    requested: Sequence[str] | None,
    default: str,
    known: Iterable[str] = (),
) -> LocalePolicy:
    return LocalePolicy(
        requested=normalize_locales(requested),
        default=normalize_locale(default),
        known=frozenset(normalize_locale(tag) for tag in known),
    )
