"""Contratos de los servicios externos que consume el validador.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Los adaptadores reales (DNS, phonenumbers) y los fakes de tests son
  intercambiables sin acoplar el Core a implementaciones concretas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MailExchangeResolver(Protocol):
    """Consulta de registros MX de un dominio."""

    def resolve(self, domain: str) -> list[str]:
        """Devuelve los hosts MX del dominio (lista vacía si no tiene).

        Raises:
            ResolverError: si la consulta no pudo completarse.
        """

        ...


@runtime_checkable
class NumberingPlanResolver(Protocol):
    """Plan de numeración telefónica internacional."""

    def country_for(self, digits: str) -> str:
        """Código ISO-3166 alpha-2 para `digits`, o "" si no hay coincidencia."""

        ...

    def canonicalize(self, digits: str, country: str) -> str:
        """Forma canónica (solo dígitos, con código de país) o "" si no aplica."""

        ...
