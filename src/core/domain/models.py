"""Modelos del dominio (Pydantic v2).

Estos modelos describen *qué* produce cada operación sobre el fichero hosts,
no *cómo* se lee o se escribe.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Operation(str, Enum):
    """Operaciones soportadas por la CLI."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    SEARCH = "search"


class SearchMatch(BaseModel):
    """Una línea del fichero que contiene el texto buscado."""

    line_number: int = Field(
        ...,
        ge=1,
        description="Número de línea (1-based) dentro del documento.",
    )
    text: str = Field(
        ...,
        description="Texto completo de la línea, tal cual aparece en el fichero.",
    )


class SearchReport(BaseModel):
    """Resultado de `search`: todas las líneas que contienen el dominio."""

    domain: str = Field(
        ...,
        description="Subcadena buscada.",
    )
    matches: list[SearchMatch] = Field(
        default_factory=list,
        description="Coincidencias en orden de aparición.",
    )

    @property
    def found(self) -> bool:
        return bool(self.matches)


class MutationResult(BaseModel):
    """Resultado de create/update/delete antes (o después) de persistirlo.

    `content` es el documento completo ya transformado; `affected_lines` son
    las líneas originales sustituidas o eliminadas (para create, la línea
    añadida).
    """

    operation: Operation
    domain: str = Field(..., min_length=1)
    ip: str | None = Field(
        default=None,
        description="Dirección escrita (solo create/update).",
    )
    content: str = Field(
        ...,
        description="Documento completo resultante.",
    )
    affected_lines: list[str] = Field(default_factory=list)
