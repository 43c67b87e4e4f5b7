"""Resolución de la ruta del SVG de salida."""

from __future__ import annotations

import httpx

from core.domain.models import Options

DEFAULT_OUTPUT_DIR = "generated"
DEFAULT_NAME = "trophy"


def _username_from_url(url: str) -> str | None:
    """Lee `username` de la query de una URL absoluta; cualquier fallo es `None`."""

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return None
    if not parsed.is_absolute_url:
        return None
    return parsed.params.get("username") or None


def resolve_output_path(
    options: Options,
    *,
    output_dir: str = DEFAULT_OUTPUT_DIR,
    default_name: str = DEFAULT_NAME,
) -> str:
    """`--output` > `<output_dir>/<username>.svg` > `<output_dir>/<default_name>.svg`.

    El username sale de `--username` o, en su defecto, de la query de `--url`.
    """

    if options.output:
        return options.output

    username = options.username
    if not username and options.url:
        username = _username_from_url(options.url)

    if username:
        return f"{output_dir}/{username}.svg"
    return f"{output_dir}/{default_name}.svg"
