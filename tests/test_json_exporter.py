import json

from adapters.json_exporter import client_to_json, export_client_json, load_client_json
from core.domain.models import Client


def test_export_writes_stable_json(tmp_path, client):
    path = export_client_json(client=client, output_path=tmp_path / "out" / "client.json")

    text = path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    data = json.loads(text)
    assert list(data) == ["document", "email", "id", "name", "password", "phone"]
    assert data["document"] == 52998224725
    assert data["phone"] == 5511999999999
    assert text == client_to_json(client)


def test_load_reads_exported_record(tmp_path, client):
    path = export_client_json(client=client, output_path=tmp_path / "client.json")
    assert load_client_json(path) == client


def test_load_ignores_unknown_keys_and_fills_defaults(tmp_path):
    path = tmp_path / "partial.json"
    path.write_text(json.dumps({"name": "Ana", "document": 9702414458, "extra": True}), encoding="utf-8")

    loaded = load_client_json(path)
    assert loaded.name == "Ana"
    assert loaded.document == 9702414458
    assert loaded.email == ""
    assert loaded.id
    assert not hasattr(loaded, "extra")


def test_new_client_json_has_every_key():
    data = json.loads(client_to_json(Client()))
    assert set(data) == {"id", "name", "document", "email", "phone", "password"}
