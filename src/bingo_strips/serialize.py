from __future__ import annotations

import json
import platform
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .formatting import format_date
from .uniqueness import batch_hash, card_hash, card_signature


def ensure_parent(path: Path, *, mkdirs: bool) -> None:
    parent = path.parent
    if not parent.exists() and mkdirs:
        parent.mkdir(parents=True, exist_ok=True)


def write_json(path: Path, data: object, *, mkdirs: bool, overwrite: bool) -> None:
    if path.exists() and not overwrite:
        raise FileExistsError(
            f"Refusing to overwrite existing file without --force: {path}"
        )
    ensure_parent(path, mkdirs=mkdirs)
    text = json.dumps(data, ensure_ascii=True, sort_keys=True, indent=2)
    path.write_text(text + "\n", encoding="utf-8")


def build_run_meta(
    *,
    app_version: str,
    params_hash: str,
    seed: Optional[int],
    rng_engine: str,
) -> Dict[str, object]:
    return {
        "app_version": app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "python_version": sys.version.split()[0],
        "platform": platform.system().lower(),
        "params_hash": params_hash,
        "seed": seed,
        "rng_engine": rng_engine,
        "hash_algorithm": "sha256",
    }


def strips_document(
    strips: Sequence[Sequence[Sequence[int]]],
    *,
    run_meta: Dict[str, object],
    codes: Optional[Sequence[Sequence[Optional[str]]]] = None,
    validity_date: Optional[str] = None,
) -> Dict[str, object]:
    entries: List[Dict[str, object]] = []
    for s_idx, strip in enumerate(strips):
        cards: List[Dict[str, object]] = []
        for c_idx, card in enumerate(strip):
            cards.append(
                {
                    "numbers": list(card),
                    "signature": card_signature(card),
                    "card_hash": card_hash(card),
                    "code": codes[s_idx][c_idx] if codes else None,
                }
            )
        entries.append(
            {
                "id": str(s_idx + 1),
                "validity_date": validity_date,
                "expires": format_date(validity_date),
                "cards": cards,
            }
        )
    return {
        "run_meta": run_meta,
        "strips": entries,
        "batch_hash": batch_hash(strips),
    }


def emit_strips_json(
    path: Path,
    *,
    strips: Sequence[Sequence[Sequence[int]]],
    run_meta: Dict[str, object],
    codes: Optional[Sequence[Sequence[Optional[str]]]] = None,
    validity_date: Optional[str] = None,
    mkdirs: bool,
    overwrite: bool,
) -> None:
    data = strips_document(strips, run_meta=run_meta, codes=codes, validity_date=validity_date)
    write_json(path, data, mkdirs=mkdirs, overwrite=overwrite)


def emit_report_json(
    path: Path, *, report: Dict[str, object], mkdirs: bool, overwrite: bool
) -> None:
    write_json(path, report, mkdirs=mkdirs, overwrite=overwrite)


def load_strips_json(
    path: Path,
) -> Tuple[List[List[List[int]]], Optional[List[List[Optional[str]]]], Optional[str]]:
    """Read strips back from a strips.json file.

    Returns (strips, codes, validity_date). Codes keep their card position;
    a card without a code holds None, and codes is None when no card has one.
    """
    data: Any = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not isinstance(data.get("strips"), list):
        raise ValueError(f"Not a strips document: {path}")
    strips: List[List[List[int]]] = []
    codes: List[List[Optional[str]]] = []
    has_codes = False
    validity_date: Optional[str] = None
    for entry in data["strips"]:
        cards = entry.get("cards", [])
        strips.append([list(card.get("numbers", [])) for card in cards])
        strip_codes = [card.get("code") for card in cards]
        if any(code is not None for code in strip_codes):
            has_codes = True
        codes.append([None if code is None else str(code) for code in strip_codes])
        validity_date = validity_date or entry.get("validity_date")
    return strips, (codes if has_codes else None), validity_date
