"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar la orquestación con detalles de presentación.
- Todo se escribe tal cual en el fichero de la consola: los mensajes y los cuerpos
  de respuesta pueden traer corchetes, códigos `:emoji:` o tabuladores.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console

USAGE = """Usage:
  trophy-svg --url URL [--output PATH]
  trophy-svg --username NAME [--query QUERY] [--output PATH]

Options:
  --url       Full request URL, including query string
  --username  GitHub username
  --query     Extra query string without the leading "?"
  --output    Output SVG path
  -h, --help  Show this help message
"""


def _write_plain(console: Console, text: str) -> None:
    console.file.write(f"{text}\n")
    console.file.flush()


def print_usage(console: Console) -> None:
    _write_plain(console, USAGE)


def print_errors(console: Console, errors: Iterable[str]) -> None:
    """Imprime cada error en su propia línea, tal cual."""

    for error in errors:
        _write_plain(console, error)


def print_written(console: Console, output_path: str) -> None:
    _write_plain(console, f"Wrote {output_path}")
