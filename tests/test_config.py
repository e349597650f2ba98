import dataclasses
import json

import pytest

from form_intake.config import load_config
from form_intake.schema import FIELD_MAP


def test_load_config_from_env(monkeypatch):
    monkeypatch.setenv("GSHEET_ID", "SHEET")
    monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS", "sa.json")
    monkeypatch.delenv("TEMPLATE_SHEET_NAME", raising=False)
    monkeypatch.delenv("FIELD_MAP_PATH", raising=False)

    cfg = load_config()
    assert cfg.sheet_id == "SHEET"
    assert cfg.sa_json == "sa.json"
    assert cfg.template_name == "Template"
    assert dict(cfg.field_map) == FIELD_MAP


def test_arguments_override_env(monkeypatch):
    monkeypatch.setenv("GSHEET_ID", "ENV")
    cfg = load_config(sheet_id="ARG", template_name="Intake")
    assert cfg.sheet_id == "ARG"
    assert cfg.template_name == "Intake"


def test_missing_sheet_id_exits(monkeypatch):
    monkeypatch.delenv("GSHEET_ID", raising=False)
    with pytest.raises(SystemExit, match="GSHEET_ID"):
        load_config()


def test_config_is_immutable(monkeypatch):
    cfg = load_config(sheet_id="SHEET")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.sheet_id = "other"
    with pytest.raises(TypeError):
        cfg.field_map["First Name"] = "A1"


def test_field_map_file(monkeypatch, tmp_path):
    path = tmp_path / "fields.json"
    path.write_text(json.dumps({"Name": " B2 ", "Email": "B3"}), encoding="utf-8")
    monkeypatch.setenv("FIELD_MAP_PATH", str(path))
    cfg = load_config(sheet_id="SHEET")
    assert dict(cfg.field_map) == {"Name": "B2", "Email": "B3"}


def test_field_map_file_rejects_blank_cells(monkeypatch, tmp_path):
    path = tmp_path / "fields.json"
    path.write_text(json.dumps({"Name": ""}), encoding="utf-8")
    monkeypatch.setenv("FIELD_MAP_PATH", str(path))
    with pytest.raises(SystemExit, match="Name"):
        load_config(sheet_id="SHEET")
