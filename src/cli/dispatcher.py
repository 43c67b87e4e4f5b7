"""Request dispatch for a single CLI invocation.

The steps run strictly in order: parse and validate, build the URL, resolve
the output path, call the handler, persist. Any failure is terminal for the
invocation and is reported on the error console; the standard console only
carries the usage text for ``--help`` and the final confirmation.
"""

from __future__ import annotations

import logging
from typing import Sequence

import httpx
from rich.console import Console

from adapters.handler_loader import HandlerLoadError, resolve_handler
from adapters.svg_exporter import export_svg
from cli.ui_components import print_errors, print_usage, print_written
from core.config import AppSettings
from core.interfaces.handler import TrophyHandler
from core.services.arguments import parse_args, validate_options
from core.services.output_path import resolve_output_path
from core.services.url_builder import build_url

logger = logging.getLogger(__name__)


async def dispatch(
    raw_args: Sequence[str],
    *,
    handler: TrophyHandler | None = None,
    settings: AppSettings | None = None,
    stdout: Console | None = None,
    stderr: Console | None = None,
) -> int:
    """Run one invocation and return its exit code (0 success, 1 failure).

    ``handler`` overrides the configured one; when omitted it is resolved
    from ``settings`` only once the request is ready to be sent.
    """

    settings = settings or AppSettings()
    stdout = stdout or Console()
    stderr = stderr or Console(stderr=True)

    options = parse_args(raw_args)
    if options.help:
        print_usage(stdout)
        return 0

    options = validate_options(options)
    if options.errors:
        print_errors(stderr, options.errors)
        print_usage(stderr)
        return 1

    url = build_url(options, base_url=settings.placeholder_url)
    if url is None:
        print_errors(stderr, ["Failed to build request URL."])
        return 1

    output_path = resolve_output_path(
        options,
        output_dir=settings.output_dir,
        default_name=settings.default_name,
    )
    logger.debug("Output path: %s", output_path)

    if handler is None:
        try:
            handler = resolve_handler(settings)
        except HandlerLoadError as exc:
            print_errors(stderr, [f"Failed to load handler: {exc}"])
            return 1
    logger.debug("Dispatching %s to %r", url, handler)

    response = await handler(httpx.Request("GET", url))
    if not response.is_success:
        body = response.text
        messages = [f"Request failed with status {response.status_code}."]
        if body:
            messages.append(body)
        print_errors(stderr, messages)
        return 1

    export_svg(svg=response.text, output_path=output_path)
    print_written(stdout, output_path)
    return 0
