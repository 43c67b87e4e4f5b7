"""Construcción de la URL de la petición.

Reglas:
- Una `--url` explícita se usa tal cual; su forma la valida el handler.
- Con `--username` se sintetiza la URL sobre un host ficticio: el handler
  solo mira la query string.
- Un `username` colado en `--query` se descarta para no pisar el explícito.
"""

from __future__ import annotations

import logging

import httpx

from core.domain.models import Options

logger = logging.getLogger(__name__)

PLACEHOLDER_URL = "http://localhost/"


def _extra_params(query: str) -> list[tuple[str, str]]:
    query_string = query[1:] if query.startswith("?") else query
    return [
        (key, value)
        for key, value in httpx.QueryParams(query_string).multi_items()
        if key != "username"
    ]


def build_url(options: Options, *, base_url: str = PLACEHOLDER_URL) -> str | None:
    """Devuelve la URL destino o `None` si no hay `url` ni `username`.

    El orden de parámetros es `username` primero y después los extra de
    `options.query` en su orden original, con duplicados.
    """

    if options.url:
        return options.url
    if not options.username:
        return None

    params: list[tuple[str, str]] = [("username", options.username)]
    if options.query:
        params.extend(_extra_params(options.query))

    url = str(httpx.URL(base_url).copy_with(params=httpx.QueryParams(params)))
    logger.debug("Built request URL: %s", url)
    return url
