from __future__ import annotations

import hashlib
import json
from typing import Iterable, List, Sequence


def card_signature(card: Sequence[int]) -> str:
    """Canonical key of a card: its numbers ascending, comma-joined."""
    return ",".join(str(x) for x in sorted(card))


def strip_signatures(strip: Sequence[Sequence[int]]) -> List[str]:
    return [card_signature(card) for card in strip]


def card_hash(card: Sequence[int]) -> str:
    payload = json.dumps(sorted(card), ensure_ascii=True, separators=(",", ":"))
    return "sha256:" + hashlib.sha256(payload.encode("utf-8")).hexdigest()


def batch_hash(strips: Iterable[Sequence[Sequence[int]]]) -> str:
    hashes = [card_hash(card) for strip in strips for card in strip]
    payload = json.dumps(hashes, ensure_ascii=True, separators=(",", ":"))
    return "sha256:" + hashlib.sha256(payload.encode("utf-8")).hexdigest()
