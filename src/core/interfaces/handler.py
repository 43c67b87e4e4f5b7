"""Contrato del handler de trofeos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el handler remoto, uno cargado por `module:attr` o una función
  de test sean intercambiables sin acoplar el Core a ninguno.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class TrophyHandler(Protocol):
    """Contrato mínimo para quien genera el SVG.

    Reglas de diseño:
    - Es asíncrono porque típicamente hará I/O (HTTP).
    - Devuelve la respuesta completa; el Core solo mira `is_success`,
      `status_code` y `text`.
    """

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        """Atiende `request` y devuelve la respuesta con el cuerpo ya leído."""

        ...
