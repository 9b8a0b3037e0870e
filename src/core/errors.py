"""Errores del Core.

Por qué un módulo propio:
- El backend puede fallar de muchas formas (red, auth, query); hacia fuera solo
  cruza un tipo: `CmsServiceError`.
- `ContentBackendError` es el tipo que levantan los adaptadores concretos.
"""

from __future__ import annotations


class ContentBackendError(RuntimeError):
    """Fallo del backend de contenidos (transporte, auth, respuesta inválida)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CmsServiceError(RuntimeError):
    """No se pudo obtener el contenido de una página.

    El fallo original del backend queda siempre encadenado en `__cause__`.
    """

    def __init__(self, page_id: str) -> None:
        super().__init__(f"Could not fetch content for {page_id}")
        self.page_id = page_id
