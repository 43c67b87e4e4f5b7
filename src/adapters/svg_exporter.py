"""Exportación del SVG devuelto por el handler.

Por qué aparte:
- Aísla el único efecto sobre el filesystem (mkdir + write).
- El Core no conoce `pathlib`; recibe rutas como texto.
"""

from __future__ import annotations

from pathlib import Path


def export_svg(*, svg: str, output_path: str | Path) -> Path:
    """Escribe `svg` en `output_path` (UTF-8), creando los directorios padre."""

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(svg, encoding="utf-8")
    return path
