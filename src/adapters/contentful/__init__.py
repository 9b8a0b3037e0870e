"""Backend Contentful.

Por qué un paquete:
- Agrupa el cliente HTTP (CDA), el parser de respuestas y la factoría del
  servicio de páginas ya cableado a Contentful.
"""

from adapters.contentful.client import ContentfulClient
from adapters.contentful.service import ContentfulCmsService

__all__ = [
    "ContentfulClient",
    "ContentfulCmsService",
]
