"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da un registro cerrado y documentado (Field) de las opciones reconocidas,
  en lugar de una bolsa dinámica de claves.
- El registro es inmutable: la validación devuelve copias.

Nota:
- Estos modelos describen *qué* pidió el usuario, no *cómo* se atiende.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Options(BaseModel):
    """Opciones de una invocación de la CLI más los diagnósticos acumulados.

    Un `errors` no vacío significa que la invocación es inválida.
    """

    model_config = ConfigDict(frozen=True)

    help: bool = Field(
        default=False,
        description="Se pidió la ayuda (`--help` / `-h`).",
    )
    url: str | None = Field(
        default=None,
        description="URL completa de la petición, incluida la query string.",
    )
    username: str | None = Field(
        default=None,
        description="Usuario de GitHub para el que se generan los trofeos.",
    )
    query: str | None = Field(
        default=None,
        description="Parámetros extra de query, sin el `?` inicial.",
    )
    output: str | None = Field(
        default=None,
        description="Ruta del SVG de salida.",
    )
    errors: list[str] = Field(
        default_factory=list,
        description="Diagnósticos en orden de detección.",
    )

    def with_errors(self, *messages: str) -> "Options":
        """Devuelve una copia con `messages` añadidos al final de `errors`."""

        if not messages:
            return self
        return self.model_copy(update={"errors": [*self.errors, *messages]})
