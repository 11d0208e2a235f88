"""Resolver MX basado en dnspython.

Implementación:
- `Resolver.resolve(domain, "MX")` con nameservers/lifetime de la config.
- NXDOMAIN / NoAnswer => lista vacía (el dominio no recibe correo).
- Cualquier otro fallo de DNS => `ResolverError`.
- Los "null MX" (RFC 7505, exchange ".") se descartan.
"""

from __future__ import annotations

import dns.exception
import dns.resolver

from core.config import AppSettings
from core.domain.errors import ResolverError
from core.interfaces.resolvers import MailExchangeResolver
from core.logger import setup_logger

logger = setup_logger(__name__)


def build_dns_resolver(settings: AppSettings | None = None) -> dns.resolver.Resolver:
    """Crea un `dns.resolver.Resolver` a partir de la config.

    Sin nameservers explícitos se lee la configuración del sistema
    (/etc/resolv.conf o el registro en Windows).
    """

    settings = settings or AppSettings()
    if settings.dns_nameservers:
        resolver = dns.resolver.Resolver(configure=False)
        resolver.nameservers = list(settings.dns_nameservers)
    else:
        resolver = dns.resolver.Resolver()
    if settings.dns_lifetime_seconds is not None:
        resolver.lifetime = settings.dns_lifetime_seconds
    return resolver


class DnsMailExchangeResolver(MailExchangeResolver):
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        resolver: dns.resolver.Resolver | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        if resolver is None:
            try:
                resolver = build_dns_resolver(self._settings)
            except dns.exception.DNSException as exc:
                raise ResolverError(f"DNS resolver unavailable: {exc}") from exc
        self._resolver = resolver

    def resolve(self, domain: str) -> list[str]:
        try:
            answer = self._resolver.resolve(domain, "MX")
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
            logger.debug("no MX answer for %s", domain)
            return []
        except dns.exception.DNSException as exc:
            raise ResolverError(f"MX lookup for {domain} failed: {exc}") from exc

        records = sorted(answer, key=lambda rdata: rdata.preference)
        hosts: list[str] = []
        for rdata in records:
            host = str(rdata.exchange)
            if host == ".":
                continue
            hosts.append(host.rstrip("."))
        logger.debug("MX for %s: %s", domain, hosts)
        return hosts
