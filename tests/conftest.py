"""Shared fixtures: CDA payloads for two sample pages and an in-memory backend."""

from __future__ import annotations

import copy
from typing import Any, Callable

import httpx
import pytest

from adapters.contentful.parser import parse_first_entry
from core.config import AppSettings
from core.domain.models import ContentEntry, SpaceLocales

DEFAULT_LOCALE = "de-DE"
JAKE_IMAGE_URL = "//images.contentful.com/l6chdlzlf8jn/2iVeCh1FGoy00Oq8WEI2aI/93c3f0841fcf59743f57e238f6ed67aa/jake.png"
FINN_DESCRIPTION_DE = "Fearless Abenteurer! Verteidiger von Pfannkuchen."
FINN_DESCRIPTION_EN = "Fearless adventurer! Defender of pancakes."


def _link(link_type: str, raw_id: str) -> dict[str, Any]:
    return {"sys": {"type": "Link", "linkType": link_type, "id": raw_id}}


def _sys(raw_id: str, content_type: str) -> dict[str, Any]:
    return {
        "id": raw_id,
        "type": "Entry",
        "contentType": {"sys": {"type": "Link", "linkType": "ContentType", "id": content_type}},
    }


FINN_PAYLOAD: dict[str, Any] = {
    "sys": {"type": "Array"},
    "total": 1,
    "skip": 0,
    "limit": 1,
    "items": [
        {
            "sys": _sys("finn-page", "page"),
            "fields": {
                "slug": {"de-DE": "finn"},
                "pageContent": {"de-DE": _link("Entry", "finn-content")},
            },
        }
    ],
    "includes": {
        "Entry": [
            {
                "sys": _sys("finn-content", "pageContent"),
                "fields": {
                    "title": {"de-DE": "Finn"},
                    "description": {
                        "de-DE": FINN_DESCRIPTION_DE,
                        "en": FINN_DESCRIPTION_EN,
                    },
                },
            }
        ]
    },
}

JACKE_PAYLOAD: dict[str, Any] = {
    "sys": {"type": "Array"},
    "total": 1,
    "skip": 0,
    "limit": 1,
    "items": [
        {
            "sys": _sys("jacke-page", "page"),
            "fields": {
                "slug": {"de-DE": "jacke"},
                "pageContent": {"de-DE": _link("Entry", "jake-content")},
            },
        }
    ],
    "includes": {
        "Entry": [
            {
                "sys": _sys("jake-content", "pageContent"),
                "fields": {
                    "title": {"de-DE": "Jake", "en": "Jake the dog"},
                    "image": {"de-DE": _link("Asset", "jake-image")},
                },
            }
        ],
        "Asset": [
            {
                "sys": {"id": "jake-image", "type": "Asset"},
                "fields": {
                    "title": {"de-DE": "Jake"},
                    "file": {
                        "de-DE": {
                            "url": JAKE_IMAGE_URL,
                            "fileName": "jake.png",
                            "contentType": "image/png",
                        }
                    },
                },
            }
        ],
    },
}

LOCALES_PAYLOAD: dict[str, Any] = {
    "sys": {"type": "Array"},
    "total": 2,
    "skip": 0,
    "limit": 1000,
    "items": [
        {"code": "de-DE", "name": "German (Germany)", "default": True, "fallbackCode": None, "sys": {"id": "l1", "type": "Locale"}},
        {"code": "en", "name": "English", "default": False, "fallbackCode": "de-DE", "sys": {"id": "l2", "type": "Locale"}},
    ],
}

SPACE_LOCALES = SpaceLocales(default="de-DE", codes=frozenset({"de-DE", "en"}))

EMPTY_PAYLOAD: dict[str, Any] = {"sys": {"type": "Array"}, "total": 0, "skip": 0, "limit": 1, "items": []}

PAYLOADS_BY_SLUG = {"finn": FINN_PAYLOAD, "jacke": JACKE_PAYLOAD}


class FakeBackend:
    """In-memory `ContentBackend`: entries by identifier value, space locales, or fixed errors."""

    def __init__(
        self,
        entries: dict[str, ContentEntry] | None = None,
        error: Exception | None = None,
        space: SpaceLocales | None = SPACE_LOCALES,
        locales_error: Exception | None = None,
    ) -> None:
        self.entries = entries or {}
        self.error = error
        self.space = space
        self.locales_error = locales_error
        self.calls: list[dict[str, str]] = []
        self.locales_calls = 0

    async def fetch_locales(self) -> SpaceLocales | None:
        self.locales_calls += 1
        if self.locales_error is not None:
            raise self.locales_error
        return self.space

    async def fetch_entry(self, *, content_type: str, field_name: str, value: str) -> ContentEntry | None:
        self.calls.append({"content_type": content_type, "field_name": field_name, "value": value})
        if self.error is not None:
            raise self.error
        return self.entries.get(value)


@pytest.fixture
def settings(monkeypatch) -> AppSettings:
    for key in ("SUNRISE_CMS_PREVIEW", "SUNRISE_CMS_ENVIRONMENT", "SUNRISE_CMS_DEFAULT_LOCALE"):
        monkeypatch.delenv(key, raising=False)
    return AppSettings()


@pytest.fixture
def finn_payload() -> dict[str, Any]:
    return copy.deepcopy(FINN_PAYLOAD)


@pytest.fixture
def jacke_payload() -> dict[str, Any]:
    return copy.deepcopy(JACKE_PAYLOAD)


@pytest.fixture
def finn_entry() -> ContentEntry:
    entry = parse_first_entry(copy.deepcopy(FINN_PAYLOAD))
    assert entry is not None
    return entry


@pytest.fixture
def jacke_entry() -> ContentEntry:
    entry = parse_first_entry(copy.deepcopy(JACKE_PAYLOAD))
    assert entry is not None
    return entry


@pytest.fixture
def fake_backend(finn_entry, jacke_entry) -> FakeBackend:
    return FakeBackend(entries={"finn": finn_entry, "jacke": jacke_entry})


@pytest.fixture
def cda_transport() -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport that serves space locales and pages by `fields.slug`, recording requests."""

    def _build(
        status_code: int = 200,
        requests: list[httpx.Request] | None = None,
        payloads: dict[str, dict[str, Any]] | None = None,
        locales: dict[str, Any] | None = None,
    ) -> httpx.MockTransport:
        served = payloads if payloads is not None else PAYLOADS_BY_SLUG

        def handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            if status_code != 200:
                return httpx.Response(
                    status_code,
                    json={"sys": {"type": "Error", "id": "NotFound"}, "message": "The resource could not be found."},
                )
            if request.url.path.endswith("/locales"):
                return httpx.Response(200, json=locales if locales is not None else LOCALES_PAYLOAD)
            slug = request.url.params.get("fields.slug")
            return httpx.Response(200, json=served.get(slug, EMPTY_PAYLOAD))

        return httpx.MockTransport(handler)

    return _build
