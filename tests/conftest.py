from __future__ import annotations

import pytest

from core.domain.errors import ResolverError
from core.domain.models import Client
from core.services.document_validator import DocumentValidator


class FakeMailResolver:
    """Dict-backed MX resolver; domains in `failing` raise `ResolverError`."""

    def __init__(self, records: dict[str, list[str]] | None = None, failing: set[str] | None = None) -> None:
        self.records = records or {}
        self.failing = failing or set()
        self.calls: list[str] = []

    def resolve(self, domain: str) -> list[str]:
        self.calls.append(domain)
        if domain in self.failing:
            raise ResolverError(f"lookup for {domain} timed out")
        return list(self.records.get(domain, []))


class FakePlanResolver:
    """Dict-backed numbering plan; canonical form defaults to the input digits."""

    def __init__(self, countries: dict[str, str] | None = None, canonical: dict[str, str] | None = None) -> None:
        self.countries = countries or {}
        self.canonical = canonical or {}
        self.calls: list[str] = []

    def country_for(self, digits: str) -> str:
        self.calls.append(digits)
        return self.countries.get(digits, "")

    def canonicalize(self, digits: str, country: str) -> str:
        return self.canonical.get(digits, digits)


PHONE_COUNTRIES = {
    "5511999999999": "BR",
    "551199999999": "BR",
    "12129240446": "US",
}


@pytest.fixture
def mail_resolver() -> FakeMailResolver:
    return FakeMailResolver(
        records={"example.com": ["mx1.example.com", "mx2.example.com"]},
        failing={"timeout.example"},
    )


@pytest.fixture
def plan_resolver() -> FakePlanResolver:
    return FakePlanResolver(
        countries=dict(PHONE_COUNTRIES),
        canonical={"551199999999": "5511999999999"},
    )


@pytest.fixture
def validator(mail_resolver: FakeMailResolver, plan_resolver: FakePlanResolver) -> DocumentValidator:
    return DocumentValidator(mail_resolver, plan_resolver)


@pytest.fixture
def client() -> Client:
    return Client(
        id="cf357e70-7dc9-4e73-8323-f9ae2be36f4a",
        name="Maria Silva",
        document=52998224725,
        email="maria@example.com",
        phone=5511999999999,
        password="s3cret",
    )
