"""Errores de validación del dominio.

Cada error está acotado a un campo del `Client`; ninguno es fatal para el
proceso. `code` es estable y apto para respuestas de API/logs.
"""

from __future__ import annotations


class ClientValidationError(Exception):
    """Base de todos los fallos de validación de un campo."""

    code = "invalid"
    default_message = "{field} is invalid"

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        self.message = message or self.default_message.format(field=field)
        super().__init__(self.message)


class EmptyFieldError(ClientValidationError):
    code = "empty_field"
    default_message = "{field} should not be empty"


class MalformedUUIDError(ClientValidationError):
    code = "malformed_uuid"
    default_message = "{field} should be a valid uuid"


class MalformedEmailError(ClientValidationError):
    code = "malformed_email"
    default_message = "{field} should have a valid email address format"


class InvalidPhoneFormatError(ClientValidationError):
    code = "invalid_phone_format"
    default_message = "{field} should have a valid number"


class InvalidChecksumError(ClientValidationError):
    code = "invalid_checksum"
    default_message = "{field} should have a CPF or CNPJ number"


class UnreachableDomainError(ClientValidationError):
    code = "unreachable_domain"
    default_message = "{field} domain should accept mail"


class UnknownCountryError(ClientValidationError):
    code = "unknown_country"
    default_message = "{field} should have defined country code"


class ResolverError(Exception):
    """Fallo de un servicio externo (DNS, plan de numeración)."""
