"""Validation of a `Client` record, one field at a time.

`DocumentValidator` owns the rules; the DNS and numbering-plan lookups are
injected so the same code runs against real services or in-memory fakes.
Every `validate_*` method returns ``None`` on success and raises a
`ClientValidationError` subclass on failure. Nothing is aggregated here:
callers run the validators they need and collect the outcomes.
"""

from __future__ import annotations

import re

from adapters.dns_mx import DnsMailExchangeResolver
from adapters.numbering_plan import PhoneNumbersPlanResolver
from core.config import AppSettings
from core.domain.checksums import is_cnpj, is_cpf
from core.domain.errors import (
    EmptyFieldError,
    InvalidChecksumError,
    InvalidPhoneFormatError,
    MalformedEmailError,
    MalformedUUIDError,
    ResolverError,
    UnknownCountryError,
    UnreachableDomainError,
)
from core.domain.models import UINT64_MAX, Client, DocumentKind
from core.interfaces.resolvers import MailExchangeResolver, NumberingPlanResolver
from core.logger import setup_logger

logger = setup_logger(__name__)

UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}|[0-9a-f]{32}",
    re.IGNORECASE,
)

EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)

_DIGITS = re.compile(r"[0-9]+")


class DocumentValidator:
    """Field validators for `Client` records."""

    def __init__(
        self,
        mail_resolver: MailExchangeResolver,
        plan_resolver: NumberingPlanResolver,
        *,
        cpf_remap_remainder_ten: bool = False,
    ) -> None:
        self._mail_resolver = mail_resolver
        self._plan_resolver = plan_resolver
        self._cpf_remap_remainder_ten = cpf_remap_remainder_ten

    def validate_id(self, client: Client) -> None:
        if client.id == "":
            raise EmptyFieldError("id")
        if UUID_PATTERN.fullmatch(client.id) is None:
            raise MalformedUUIDError("id")

    def validate_name(self, client: Client) -> None:
        if client.name == "":
            raise EmptyFieldError("name")

    def validate_document(self, client: Client) -> None:
        if client.document == 0:
            raise EmptyFieldError("document")
        if self.document_kind(client) is None:
            logger.debug("document of %s matches neither CPF nor CNPJ", client.id)
            raise InvalidChecksumError("document")

    def is_document_cpf(self, client: Client) -> bool:
        return is_cpf(client.document, remap_ten=self._cpf_remap_remainder_ten)

    def is_document_cnpj(self, client: Client) -> bool:
        return is_cnpj(client.document)

    def document_kind(self, client: Client) -> DocumentKind | None:
        """Checksum family the document satisfies, CPF taking precedence."""

        if self.is_document_cpf(client):
            return DocumentKind.CPF
        if self.is_document_cnpj(client):
            return DocumentKind.CNPJ
        return None

    def validate_email(self, client: Client) -> None:
        """Check the address shape, then that its domain has a mail exchanger.

        The pattern admits exactly one ``@``, so the domain is whatever
        follows it. The MX lookup blocks until the resolver returns.
        """

        if not client.email.strip():
            raise EmptyFieldError("email")
        if EMAIL_PATTERN.fullmatch(client.email) is None:
            raise MalformedEmailError("email")

        domain = client.email.rpartition("@")[2]
        try:
            hosts = self._mail_resolver.resolve(domain)
        except ResolverError as exc:
            logger.debug("MX lookup for %s failed: %s", domain, exc)
            raise UnreachableDomainError("email") from exc
        if not hosts:
            logger.debug("no MX records for %s", domain)
            raise UnreachableDomainError("email")

    def get_phone_country(self, client: Client) -> str:
        if client.phone == 0:
            return ""
        return self._plan_resolver.country_for(str(client.phone)) or ""

    def validate_phone(self, client: Client) -> None:
        self.normalize_phone(client)

    def canonical_phone(self, client: Client) -> int:
        """Canonical phone as an integer, raising like `validate_phone`."""

        return self.normalize_phone(client)[1]

    def normalize_phone(self, client: Client) -> tuple[str, int]:
        """Country and canonical phone from a single lookup, raising like `validate_phone`."""

        if client.phone == 0:
            raise EmptyFieldError("phone")
        country = self.get_phone_country(client)
        if not country:
            raise UnknownCountryError("phone")

        canonical = self._plan_resolver.canonicalize(str(client.phone), country)
        if _DIGITS.fullmatch(canonical or "") is None:
            logger.debug("phone %s has no canonical form for %s", client.phone, country)
            raise InvalidPhoneFormatError("phone")
        number = int(canonical)
        if number == 0 or number > UINT64_MAX:
            raise InvalidPhoneFormatError("phone")
        return country, number


def build_validator(settings: AppSettings | None = None) -> DocumentValidator:
    """Create a `DocumentValidator` backed by the DNS and phonenumbers adapters."""

    settings = settings or AppSettings()
    return DocumentValidator(
        DnsMailExchangeResolver(settings),
        PhoneNumbersPlanResolver(settings),
        cpf_remap_remainder_ten=settings.cpf_remap_remainder_ten,
    )
