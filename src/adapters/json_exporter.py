"""Importación/exportación JSON del `Client`.

Formato de intercambio: claves `id, name, document, email, phone, password`;
`document` y `phone` como enteros sin signo, el resto como strings.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import Client


def client_to_json(client: Client) -> str:
    """Serializa con formato estable (claves ordenadas, indentado)."""

    payload = client.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_client_json(*, client: Client, output_path: Path) -> Path:
    """Exporta `Client` a JSON UTF-8."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(client_to_json(client), encoding="utf-8")
    return output_path


def load_client_json(path: Path) -> Client:
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    return Client.model_validate(data)
