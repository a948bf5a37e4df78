"""Tests for the image dialog search CLI."""

import json
import sys

from image_dialog_search.search import main


def _run(monkeypatch, capsys, *argv: str) -> str:
    monkeypatch.setattr(sys, "argv", ["image-dialog-search", *argv])
    main()
    return capsys.readouterr().out


def test_sources_command(monkeypatch, capsys, tmp_path):
    config = tmp_path / "sources.json"
    config.write_text(json.dumps({"picto": {"apiResourceName": "pictures"}}))

    out = _run(monkeypatch, capsys, "sources", "--content-types", "19", "--config", str(config))
    data = json.loads(out)

    assert data["contentTypes"] == [19]
    assert data["catalogue"][0]["apiResourceName"] == "pictures"
    assert data["catalogue"][1]["apiResourceName"] == "images/ght1t"


def test_reconcile_command(monkeypatch, capsys, tmp_path):
    snapshot = tmp_path / "snapshot.json"
    snapshot.write_text(json.dumps({"searchFields": {"contentTypeId": 99, "keywords": "port"}}))

    out = _run(monkeypatch, capsys, "reconcile", "--snapshot", str(snapshot), "--content-types", "20")

    assert json.loads(out) == {"searchFields": {"contentTypeId": 20, "keywords": "port"}}


def test_args_command(monkeypatch, capsys, tmp_path):
    fields = tmp_path / "fields.json"
    fields.write_text(json.dumps({"contentTypeId": 20, "myImages": True, "codeZones": [5]}))

    out = _run(monkeypatch, capsys, "args", "--fields", str(fields), "--user", "alice")
    first_line, _, rest = out.partition("\n")

    assert first_line == "Resource: images/ght1t"
    assert json.loads(rest) == {"zoneIds": [5], "createdBy": "alice"}


def test_no_command_prints_help(monkeypatch, capsys):
    out = _run(monkeypatch, capsys)
    assert "usage" in out
