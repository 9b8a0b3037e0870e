"""Cliente de la Content Delivery API de Contentful.

Responsabilidad:
- Traducir "un entry de tipo X con `fields.<campo> == valor`" a una query CDA.
- Pedir todos los locales (`locale=*`) para que el fallback se decida en el
  dominio, no en el backend.
- Leer los locales del space (`/locales`): el marcado `default` y todos los `code`.
- Convertir cualquier fallo (red, auth, status, JSON inválido) en
  `ContentBackendError`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from adapters.contentful.parser import parse_first_entry, parse_space_locales
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import ContentEntry, SpaceLocales
from core.errors import ContentBackendError

logger = logging.getLogger(__name__)


class ContentfulClient:
    """Implementa `core.interfaces.ContentBackend` sobre la CDA (HTTP/JSON)."""

    def __init__(
        self,
        *,
        space_id: str,
        token: str,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._space_id = space_id
        self._token = token
        self._transport = transport

    @property
    def environment_path(self) -> str:
        return f"/spaces/{self._space_id}/environments/{self._settings.environment}"

    @property
    def entries_path(self) -> str:
        return f"{self.environment_path}/entries"

    @property
    def locales_path(self) -> str:
        return f"{self.environment_path}/locales"

    def build_params(self, *, content_type: str, field_name: str, value: str) -> dict[str, str]:
        return {
            "content_type": content_type,
            f"fields.{field_name}": value,
            "locale": "*",
            "include": str(self._settings.include_depth),
            "limit": "1",
        }

    async def fetch_entry(
        self,
        *,
        content_type: str,
        field_name: str,
        value: str,
    ) -> ContentEntry | None:
        params = self.build_params(content_type=content_type, field_name=field_name, value=value)
        payload = await self._get_json(self.entries_path, params=params)
        try:
            return parse_first_entry(payload)
        except ValidationError as exc:
            raise ContentBackendError(f"Malformed entry in Contentful response: {exc}") from exc

    async def fetch_locales(self) -> SpaceLocales | None:
        payload = await self._get_json(self.locales_path, params={})
        try:
            return parse_space_locales(payload)
        except ValidationError as exc:
            raise ContentBackendError(f"Malformed locales in Contentful response: {exc}") from exc

    async def _get_json(self, path: str, *, params: dict[str, str]) -> dict[str, Any]:
        headers = {"Authorization": f"Bearer {self._token}"}
        try:
            async with build_async_client(
                self._settings,
                base_url=self._settings.contentful_base_url,
                extra_headers=headers,
                transport=self._transport,
            ) as client:
                resp = await client.get(path, params=params)
        except httpx.HTTPError as exc:
            raise ContentBackendError(f"Contentful request failed: {exc}") from exc

        if resp.status_code != 200:
            logger.debug(
                "contentful_request_rejected",
                extra={"status": resp.status_code, "path": path},
            )
            raise ContentBackendError(
                f"Contentful returned HTTP {resp.status_code}: {_error_message(resp)}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise ContentBackendError("Contentful returned a non-JSON body") from exc
        if not isinstance(data, dict):
            raise ContentBackendError("Contentful returned an unexpected JSON payload")
        return data


def _error_message(resp: httpx.Response) -> str:
    """Mensaje de error de la CDA (`{"message": ...}`) si existe."""

    try:
        data = resp.json()
    except ValueError:
        return resp.reason_phrase or "unknown error"
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return resp.reason_phrase or "unknown error"
