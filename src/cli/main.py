"""CLI de clientcheck (typer).

La CLI es un *llamador* del Core: ejecuta cada validador por separado y
reúne los resultados para mostrarlos.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.json_exporter import client_to_json, export_client_json, load_client_json
from cli import doctor
from cli.ui_components import build_outcomes_table, print_banner
from core.config import AppSettings
from core.domain.errors import ClientValidationError, ResolverError
from core.domain.models import Client, FieldOutcome
from core.logger import set_log_level
from core.services.document_validator import DocumentValidator, build_validator

app = typer.Typer(no_args_is_help=True, help="Validate Client records (UUID, CPF/CNPJ, e-mail, phone).")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _check_document(validator: DocumentValidator, client: Client) -> str | None:
    validator.validate_document(client)
    kind = validator.document_kind(client)
    return kind.value.upper() if kind is not None else None


def _check_phone(validator: DocumentValidator, client: Client) -> str | None:
    country, number = validator.normalize_phone(client)
    return f"{country} +{number}"


def _checks(validator: DocumentValidator) -> list[tuple[str, Callable[[Client], Optional[str]]]]:
    return [
        ("id", validator.validate_id),
        ("name", validator.validate_name),
        ("document", lambda client: _check_document(validator, client)),
        ("email", validator.validate_email),
        ("phone", lambda client: _check_phone(validator, client)),
    ]


def collect_outcomes(validator: DocumentValidator, client: Client) -> list[FieldOutcome]:
    """Run every field validator once and keep one outcome per field."""

    outcomes: list[FieldOutcome] = []
    for field, check in _checks(validator):
        try:
            detail = check(client)
        except ClientValidationError as exc:
            outcomes.append(FieldOutcome.from_error(field, exc))
        else:
            outcomes.append(FieldOutcome.ok(field, detail))
    return outcomes


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(f"invalid CLIENTCHECK_* configuration:\n{exc}") from exc
    set_log_level("DEBUG" if verbose else settings.log_level)


@app.command()
def new(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the record to this file."),
) -> None:
    """Create an empty record with a fresh identifier."""

    client = Client()
    if output is None:
        typer.echo(client_to_json(client), nl=False)
        return
    path = export_client_json(client=client, output_path=output)
    _console.print(f"[green]Saved:[/green] {path}")


@app.command()
def validate(
    path: Optional[Path] = typer.Argument(None, exists=True, dir_okay=False, help="JSON record to validate."),
    id_: Optional[str] = typer.Option(None, "--id", help="Override the identifier."),
    name: Optional[str] = typer.Option(None, "--name"),
    document: Optional[int] = typer.Option(None, "--document", help="CPF or CNPJ, digits only."),
    email: Optional[str] = typer.Option(None, "--email"),
    phone: Optional[int] = typer.Option(None, "--phone", help="Phone with country code, digits only."),
    as_json: bool = typer.Option(False, "--json", help="Print outcomes as JSON."),
) -> None:
    """Validate every field of a record; exit code 1 if any field fails."""

    overrides = {
        "id": id_,
        "name": name,
        "document": document,
        "email": email,
        "phone": phone,
    }
    try:
        base = load_client_json(path) if path is not None else Client()
        data = base.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        client = Client.model_validate(data)
    except (ValidationError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        validator = build_validator()
    except ResolverError as exc:
        _console.print(f"[red]DNS resolver unavailable:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    outcomes = collect_outcomes(validator, client)

    if as_json:
        typer.echo(json.dumps([o.model_dump(mode="json") for o in outcomes], ensure_ascii=False, indent=2))
    else:
        print_banner(_console)
        _console.print(build_outcomes_table(outcomes))

    if not all(o.passed for o in outcomes):
        raise typer.Exit(code=1)


def run() -> None:
    app()
