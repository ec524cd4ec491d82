"""Stable phrasing variety.

Guide pages must read differently from one another but identically across
requests, so variants are picked from record ids or from SHA-256 digests,
never from `random` without a seed or from Python's salted `hash()`.
"""

import hashlib
from typing import Sequence, TypeVar

T = TypeVar("T")


def variant_index(stain_id: int, material_id: int, count: int, offset: int = 0) -> int:
    """Index into a list of `count` variants for a stain/material pair."""
    if count <= 0:
        raise ValueError("count must be positive")
    return (stain_id + material_id + offset) % count


def pick(options: Sequence[T], stain_id: int, material_id: int, offset: int = 0) -> T:
    return options[variant_index(stain_id, material_id, len(options), offset)]


def text_seed(*parts: str) -> int:
    """Deterministic integer seed derived from text."""
    digest = hashlib.sha256("\x1f".join(parts).encode("utf-8")).hexdigest()
    return int(digest[:16], 16)
