"""Servicio de páginas sobre Contentful."""

from __future__ import annotations

from typing import Iterable

import httpx

from adapters.contentful.client import ContentfulClient
from core.config import AppSettings
from core.services.cms_page_service import CmsPageService


class ContentfulCmsService(CmsPageService):
    """`CmsPageService` con `ContentfulClient` como backend."""

    @classmethod
    def of(
        cls,
        space_id: str,
        token: str,
        page_type_name: str,
        page_type_id_field_name: str,
        *,
        default_locale: str | None = None,
        space_locales: Iterable[str] | None = None,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ContentfulCmsService":
        settings = settings or AppSettings()
        backend = ContentfulClient(
            space_id=space_id,
            token=token,
            settings=settings,
            transport=transport,
        )
        return cls(
            backend=backend,
            page_type_name=page_type_name,
            page_type_id_field_name=page_type_id_field_name,
            default_locale=default_locale,
            space_locales=space_locales,
            settings=settings,
        )
