from __future__ import annotations

import hashlib
import random
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class RandomSource:
    engine: str

    def randrange(self, stop: int) -> int:
        raise NotImplementedError

    def shuffle(self, arr: List[int]) -> None:
        raise NotImplementedError


class PyRandomSource(RandomSource):
    def __init__(self, seed: Optional[int] = None):
        super().__init__(engine="py_random")
        self._rng = random.Random(seed)

    def randrange(self, stop: int) -> int:
        return self._rng.randrange(stop)

    def shuffle(self, arr: List[int]) -> None:
        self._rng.shuffle(arr)


class NumpyPCG64Source(RandomSource):
    def __init__(self, seed: Optional[int] = None):
        try:
            import numpy as np
        except ImportError as exc:
            raise RuntimeError("numpy is not installed; install bingo-strips[pcg]") from exc
        super().__init__(engine="numpy_pcg64")
        self._rng = np.random.Generator(np.random.PCG64(seed))

    def randrange(self, stop: int) -> int:
        return int(self._rng.integers(low=0, high=stop))

    def shuffle(self, arr: List[int]) -> None:
        order = self._rng.permutation(len(arr))
        arr[:] = [arr[int(i)] for i in order]


def create_rng(engine: str, seed: Optional[int] = None) -> RandomSource:
    """Build a random source. ``seed=None`` seeds from OS entropy."""
    engine = (engine or "py_random").strip().lower()
    if engine == "py_random":
        return PyRandomSource(seed)
    if engine == "numpy_pcg64":
        return NumpyPCG64Source(seed)
    raise ValueError(f"Unsupported RNG engine: {engine}")


def derive_seed(base_seed: int, index: int, purpose: str) -> int:
    """Derive a sub-stream seed from base seed, index, and purpose using sha256.

    Returns a 63-bit positive integer suitable for seeding common RNGs.
    """
    digest = hashlib.sha256(f"{base_seed}|{index}|{purpose}".encode("utf-8")).digest()
    return int.from_bytes(digest[:8], byteorder="big") & ((1 << 63) - 1)
