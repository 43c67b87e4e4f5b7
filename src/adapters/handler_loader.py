"""Carga de un handler propio a partir de `module:attr`."""

from __future__ import annotations

import importlib
import inspect

from adapters.http_client import RemoteTrophyHandler
from core.config import AppSettings
from core.interfaces.handler import TrophyHandler


class HandlerLoadError(Exception):
    """El handler configurado no se pudo importar o no es invocable."""


def load_handler(spec: str) -> TrophyHandler:
    """Importa `module:attr`; si `attr` es una clase, la instancia sin argumentos."""

    module_name, sep, attr_name = spec.partition(":")
    if not sep or not module_name or not attr_name:
        raise HandlerLoadError(f"Expected 'module:attr', got {spec!r}.")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise HandlerLoadError(f"Cannot import module {module_name!r}: {exc}") from exc

    try:
        handler = getattr(module, attr_name)
    except AttributeError as exc:
        raise HandlerLoadError(f"Module {module_name!r} has no attribute {attr_name!r}.") from exc

    if inspect.isclass(handler):
        try:
            handler = handler()
        except TypeError as exc:
            raise HandlerLoadError(f"Cannot instantiate {spec!r} without arguments: {exc}") from exc
    if not callable(handler):
        raise HandlerLoadError(f"{spec!r} is not callable.")
    return handler


def resolve_handler(settings: AppSettings | None = None) -> TrophyHandler:
    """Handler configurado (`TROPHY_SVG_HANDLER`) o, si no hay, el remoto."""

    settings = settings or AppSettings()
    if settings.handler:
        return load_handler(settings.handler)
    return RemoteTrophyHandler(settings)
