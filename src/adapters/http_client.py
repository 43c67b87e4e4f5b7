"""Wrapper de httpx y handler remoto por defecto.

Por qué un wrapper:
- Estandariza timeouts y headers del único punto que habla con la red.
- Facilita testeo: se puede sustituir el transporte por `httpx.MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "image/svg+xml,*/*;q=0.8",
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class RemoteTrophyHandler:
    """Handler que delega la generación del SVG en el servicio de trofeos.

    Solo reenvía la query string: el host de la petición es un placeholder
    y el servicio atiende en la raíz de `service_base_url`.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def target_url(self, request: httpx.Request) -> httpx.URL:
        return httpx.URL(self._settings.service_base_url).copy_with(query=request.url.query)

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        target = self.target_url(request)
        logger.debug("Forwarding %s to %s", request.url, target)
        async with build_async_client(self._settings, transport=self._transport) as client:
            response = await client.get(target)
        logger.debug("Trophy service answered HTTP %s", response.status_code)
        return response
