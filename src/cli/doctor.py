"""Doctor command for environment diagnostics."""

from __future__ import annotations

import dns.version
import phonenumbers
import typer
from rich.console import Console
from rich.table import Table

from adapters.dns_mx import DnsMailExchangeResolver
from adapters.numbering_plan import PhoneNumbersPlanResolver
from core.config import AppSettings, get_user_env_file
from core.domain.errors import ResolverError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

_SAMPLE_PHONE = "5511999999999"


def _check_mx(settings: AppSettings, domain: str) -> tuple[bool, str]:
    try:
        hosts = DnsMailExchangeResolver(settings).resolve(domain)
    except ResolverError as exc:
        return False, str(exc)
    if not hosts:
        return False, f"{domain} has no MX records"
    return True, ", ".join(hosts[:3])


def _check_plan(settings: AppSettings) -> tuple[bool, str]:
    country = PhoneNumbersPlanResolver(settings).country_for(_SAMPLE_PHONE)
    if country != "BR":
        return False, f"+{_SAMPLE_PHONE} resolved to {country!r}, expected 'BR'"
    return True, f"+{_SAMPLE_PHONE} -> {country}"


@app.command()
def run(
    domain: str = typer.Option("gmail.com", "--domain", help="Domain used for the MX lookup."),
) -> None:
    """Run baseline diagnostics and show the effective configuration."""

    settings = AppSettings()

    table = Table(title="clientcheck doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("User env file", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))
    nameservers = ", ".join(settings.dns_nameservers) or "system resolver"
    table.add_row("DNS nameservers", "OK", nameservers)
    lifetime = settings.dns_lifetime_seconds
    table.add_row("DNS lifetime", "OK", "dnspython default" if lifetime is None else f"{lifetime}s")
    table.add_row("CPF remainder 10 -> 0", "ON" if settings.cpf_remap_remainder_ten else "OFF", "")
    table.add_row("BR ninth-digit retry", "ON" if settings.phone_legacy_ninth_digit else "OFF", "")

    # Libraries
    table.add_row("dnspython", "OK", dns.version.version)
    table.add_row("phonenumbers", "OK", phonenumbers.__version__)

    # Lookups (best-effort)
    ok_mx, detail_mx = _check_mx(settings, domain)
    table.add_row("MX lookup", "OK" if ok_mx else "FAIL", detail_mx)

    ok_plan, detail_plan = _check_plan(settings)
    table.add_row("Numbering plan", "OK" if ok_plan else "FAIL", detail_plan)

    _console.print(table)

    if not ok_mx:
        _console.print(
            "\n[yellow]Note:[/yellow] e-mail validation reports every address as unreachable "
            "while MX lookups fail. Set CLIENTCHECK_DNS_NAMESERVERS to use explicit resolvers."
        )
