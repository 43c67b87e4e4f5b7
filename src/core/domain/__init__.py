"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP, CLI, ni el handler: solo conceptos del problema.
"""

from core.domain.models import Options

__all__ = ["Options"]
