"""Modelos del dominio (Pydantic v2).

Nota:
- Estos modelos describen *qué* es un cliente, no *cómo* se valida contra
  servicios externos (eso vive en `core.services`).
"""

from __future__ import annotations

import uuid
from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.errors import ClientValidationError

UINT64_MAX = 2**64 - 1


def _new_id() -> str:
    return str(uuid.uuid4())


class DocumentKind(str, Enum):
    """Familia de documento fiscal brasileño."""

    CPF = "cpf"
    CNPJ = "cnpj"


class Client(BaseModel):
    """Registro de identidad, contacto y documento fiscal de una persona o empresa.

    Un `Client()` recién creado tiene un UUID aleatorio y el resto de campos
    vacíos/cero; el llamador los completa después.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    id: str = Field(
        default_factory=_new_id,
        description="UUID canónico (8-4-4-4-12) o de 32 dígitos hex sin guiones.",
    )
    name: str = Field(
        default="",
        description="Nombre para mostrar.",
    )
    document: int = Field(
        default=0,
        ge=0,
        le=UINT64_MAX,
        description="CPF o CNPJ como entero sin separadores (se pierden ceros a la izquierda).",
    )
    email: str = Field(
        default="",
        description="Dirección de correo electrónico.",
    )
    phone: int = Field(
        default=0,
        ge=0,
        le=UINT64_MAX,
        description="Teléfono como entero, con código de país opcional y sin '+'.",
    )
    password: str = Field(
        default="",
        repr=False,
        description="Contraseña opaca; no se valida aquí.",
    )


class FieldOutcome(BaseModel):
    """Resultado de validar un campo concreto."""

    field: str = Field(..., min_length=1)
    passed: bool
    code: str | None = None
    message: str | None = None
    detail: str | None = Field(
        default=None,
        description="Información extra de un campo válido (tipo de documento, teléfono normalizado).",
    )

    @classmethod
    def ok(cls, field: str, detail: str | None = None) -> "FieldOutcome":
        return cls(field=field, passed=True, detail=detail)

    @classmethod
    def from_error(cls, field: str, error: ClientValidationError) -> "FieldOutcome":
        return cls(field=field, passed=False, code=error.code, message=error.message)
