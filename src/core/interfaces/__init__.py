"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el servicio de páginas depende del contrato
  del backend, no de Contentful.
"""

from core.interfaces.content_backend import ContentBackend

__all__ = ["ContentBackend"]
