from __future__ import annotations

import importlib.util
from pathlib import Path

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "export_biodata.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("export_biodata", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_script_writes_biodata_file(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    out_file = _load_script().main(out_dir=tmp_path)

    assert out_file == tmp_path / "R3_Academy_Biodata.csv"
    assert len(out_file.read_text(encoding="utf-8").split("\n")) == 6
