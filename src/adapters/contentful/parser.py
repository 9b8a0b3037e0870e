"""Conversión de respuestas CDA (Contentful) al árbol del dominio.

Formato de entrada (con `locale=*`):
- `items`: entries; cada campo es `{"<locale>": valor}`.
- `includes.Entry` / `includes.Asset`: entries/assets enlazados.
- Un link es `{"sys": {"type": "Link", "linkType": "Entry"|"Asset", "id": ...}}`.

Links no incluidos en la respuesta (o cíclicos) se descartan: el campo queda
ausente, no es un error.
"""

from __future__ import annotations

from typing import Any

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


_LinkKey = tuple[str, str]


class _LinkIndex:
    def __init__(self, payload: dict[str, Any]) -> None:
        self._raw: dict[_LinkKey, dict[str, Any]] = {}
        includes = payload.get("includes") if isinstance(payload.get("includes"), dict) else {}
        for link_type in ("Entry", "Asset"):
            for raw in includes.get(link_type) or []:
                self._add(link_type, raw)
        items = payload.get("items")
        for raw in items if isinstance(items, list) else []:
            self._add("Entry", raw)

    def _add(self, link_type: str, raw: Any) -> None:
        if not isinstance(raw, dict):
            return
        sys = raw.get("sys") if isinstance(raw.get("sys"), dict) else {}
        raw_id = sys.get("id")
        if isinstance(raw_id, str) and raw_id:
            self._raw.setdefault((link_type, raw_id), raw)

    def get(self, key: _LinkKey) -> dict[str, Any] | None:
        return self._raw.get(key)


def _link_key(value: dict[str, Any]) -> _LinkKey | None:
    sys = value.get("sys")
    if not isinstance(sys, dict) or sys.get("type") != "Link":
        return None
    link_type = sys.get("linkType")
    raw_id = sys.get("id")
    if link_type not in ("Entry", "Asset") or not isinstance(raw_id, str):
        return None
    return link_type, raw_id


class CdaParser:
    """Convierte un payload de `/entries` en `ContentEntry`."""

    def __init__(self, payload: dict[str, Any]) -> None:
        self._payload = payload
        self._index = _LinkIndex(payload)

    def first_entry(self) -> ContentEntry | None:
        items = self._payload.get("items")
        if not isinstance(items, list) or not items or not isinstance(items[0], dict):
            return None
        raw = items[0]
        sys = raw.get("sys") if isinstance(raw.get("sys"), dict) else {}
        entry_id = sys.get("id") or ""
        visiting = {("Entry", entry_id)}
        return ContentEntry(
            id=entry_id,
            content_type=_content_type_id(sys) or "",
            fields=self._localized_fields(raw.get("fields"), visiting),
        )

    def _localized_fields(self, raw_fields: Any, visiting: set[_LinkKey]) -> dict[str, FieldValue]:
        out: dict[str, FieldValue] = {}
        if not isinstance(raw_fields, dict):
            return out
        for name, per_locale in raw_fields.items():
            if not isinstance(per_locale, dict):
                continue
            values: dict[str, FieldValue] = {}
            for locale, raw in per_locale.items():
                converted = self._value(raw, visiting)
                if converted is not None:
                    values[locale] = converted
            if values:
                out[name] = Localized(values=values)
        return out

    def _value(self, raw: Any, visiting: set[_LinkKey]) -> FieldValue | None:
        if raw is None:
            return None
        if isinstance(raw, (str, bool, int, float)):
            return Scalar(value=raw)
        if isinstance(raw, list):
            items = [item for item in (self._value(r, visiting) for r in raw) if item is not None]
            return ListValue(items=items)
        if not isinstance(raw, dict):
            return None

        key = _link_key(raw)
        if key is not None:
            return self._resolve_link(key, visiting)
        if raw.get("nodeType") == "document":
            return RichText(document=raw)

        values: dict[str, FieldValue] = {}
        for name, child in raw.items():
            converted = self._value(child, visiting)
            if converted is not None:
                values[str(name)] = converted
        return Structured(values=values)

    def _resolve_link(self, key: _LinkKey, visiting: set[_LinkKey]) -> FieldValue | None:
        if key in visiting:
            return None
        raw = self._index.get(key)
        if raw is None:
            return None

        if key[0] == "Asset":
            return _asset(raw)

        sys = raw.get("sys") if isinstance(raw.get("sys"), dict) else {}
        return EntryNode(
            id=key[1],
            content_type=_content_type_id(sys),
            fields=self._localized_fields(raw.get("fields"), visiting | {key}),
        )


def _content_type_id(sys: dict[str, Any]) -> str | None:
    content_type = sys.get("contentType")
    if not isinstance(content_type, dict):
        return None
    inner = content_type.get("sys")
    if not isinstance(inner, dict):
        return None
    value = inner.get("id")
    return value if isinstance(value, str) else None


def _asset(raw: dict[str, Any]) -> FieldValue | None:
    """Asset -> `Localized({locale: AssetRef})` según `fields.file`."""

    fields = raw.get("fields") if isinstance(raw.get("fields"), dict) else {}
    files = fields.get("file") if isinstance(fields.get("file"), dict) else {}
    titles = fields.get("title") if isinstance(fields.get("title"), dict) else {}

    values: dict[str, FieldValue] = {}
    for locale, file in files.items():
        if not isinstance(file, dict):
            continue
        url = file.get("url")
        if not isinstance(url, str) or not url:
            continue
        title = titles.get(locale)
        values[locale] = AssetRef(
            url=url,
            title=title if isinstance(title, str) else None,
            file_name=file.get("fileName") if isinstance(file.get("fileName"), str) else None,
            content_type=file.get("contentType") if isinstance(file.get("contentType"), str) else None,
        )
    if not values:
        return None
    return Localized(values=values)


def parse_first_entry(payload: dict[str, Any]) -> ContentEntry | None:
    return CdaParser(payload).first_entry()


def parse_space_locales(payload: dict[str, Any]) -> SpaceLocales | None:
    """Payload de `/locales` -> `SpaceLocales`.

    Formato: `{"items": [{"code": "de-DE", "default": true, ...}, ...]}`.
    Sin un locale marcado como `default` no hay nada fiable que devolver.
    """

    items = payload.get("items")
    if not isinstance(items, list):
        return None

    codes: set[str] = set()
    default: str | None = None
    for item in items:
        if not isinstance(item, dict):
            continue
        code = item.get("code")
        if not isinstance(code, str) or not code:
            continue
        codes.add(code)
        if item.get("default") is True and default is None:
            default = code
    if default is None:
        return None
    return SpaceLocales(default=default, codes=frozenset(codes))
