from __future__ import annotations

import json
from pathlib import Path

import pytest

from bingo_strips.core import BuildParams, StripBatchBuilder
from bingo_strips.serialize import build_run_meta, emit_strips_json, load_strips_json


def _meta():
    return build_run_meta(app_version="test", params_hash="sha256:x", seed=1, rng_engine="py_random")


def test_strips_document_reloads(tmp_path: Path):
    result = StripBatchBuilder().build(BuildParams(count=2, seed=8, validity_date="2025-01-09"))
    path = tmp_path / "out" / "strips.json"
    emit_strips_json(
        path,
        strips=result.strips,
        run_meta=_meta(),
        codes=result.codes,
        validity_date=result.validity_date,
        mkdirs=True,
        overwrite=False,
    )
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["strips"][0]["expires"] == "09/01/2025"
    assert data["batch_hash"].startswith("sha256:")
    assert data["run_meta"]["hash_algorithm"] == "sha256"

    strips, codes, validity = load_strips_json(path)
    assert strips == result.strips
    assert codes == result.codes
    assert validity == "2025-01-09"


def test_refuses_overwrite_without_force(tmp_path: Path):
    path = tmp_path / "strips.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(FileExistsError):
        emit_strips_json(path, strips=[], run_meta=_meta(), mkdirs=True, overwrite=False)


def test_load_rejects_foreign_json(tmp_path: Path):
    path = tmp_path / "other.json"
    path.write_text('{"cards": []}', encoding="utf-8")
    with pytest.raises(ValueError):
        load_strips_json(path)


def test_missing_codes_keep_their_card_position(tmp_path: Path):
    path = tmp_path / "strips.json"
    cards = [
        {"numbers": [1, 2, 3], "code": None},
        {"numbers": [4, 5, 6], "code": "0002"},
    ]
    path.write_text(json.dumps({"strips": [{"id": "1", "cards": cards}]}), encoding="utf-8")
    strips, codes, validity = load_strips_json(path)
    assert strips == [[[1, 2, 3], [4, 5, 6]]]
    assert codes == [[None, "0002"]]
    assert validity is None


def test_file_without_codes_loads_none(tmp_path: Path):
    path = tmp_path / "strips.json"
    cards = [{"numbers": [1, 2, 3], "code": None}]
    path.write_text(json.dumps({"strips": [{"id": "1", "cards": cards}]}), encoding="utf-8")
    _strips, codes, _validity = load_strips_json(path)
    assert codes is None
