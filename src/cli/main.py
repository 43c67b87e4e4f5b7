"""Entrypoint de la CLI `trophy-svg`.

Responsabilidades:
- Cargar la configuración y el logging (Rich) una sola vez por proceso.
- Ejecutar el dispatcher en un event loop y traducir su resultado a exit code.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Sequence

import httpx
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from cli.dispatcher import dispatch
from cli.ui_components import print_errors, print_usage
from core.config import AppSettings
from core.services.arguments import parse_args


def configure_logging(settings: AppSettings, console: Console | None = None) -> None:
    """Envía el logging a stderr vía `RichHandler` al nivel configurado."""

    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console or Console(stderr=True),
                show_path=False,
            )
        ],
        force=True,
    )


def _describe_settings_error(exc: ValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return f"Invalid configuration: {details}"


def main(argv: Sequence[str] | None = None) -> int:
    """Ejecuta una invocación completa y devuelve el exit code."""

    raw_args = list(sys.argv[1:] if argv is None else argv)
    stderr = Console(stderr=True)

    try:
        settings = AppSettings()
    except ValidationError as exc:
        # `--help` no depende de la configuración.
        if parse_args(raw_args).help:
            print_usage(Console())
            return 0
        print_errors(stderr, [_describe_settings_error(exc)])
        return 1
    configure_logging(settings, stderr)

    try:
        return asyncio.run(dispatch(raw_args, settings=settings, stderr=stderr))
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        print_errors(stderr, [f"Request failed: {exc}"])
        return 1


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
