"""Seed strings at the boundary: synthesis, parsing and shareable fragments."""

from __future__ import annotations

import logging
import math
import random
import re
from typing import Optional, Union

logger = logging.getLogger(__name__)

SEED_LENGTH = 12
_DIGITS = "0123456789"
_SEED_RE = re.compile(r"^\d+$")


def generate_seed_string(length: int = SEED_LENGTH, *, source: Optional[random.Random] = None) -> str:
    """Fresh random digit string; not reproducible unless ``source`` is seeded."""

    source = source or random.Random()
    return "".join(source.choice(_DIGITS) for _ in range(length))


def parse_seed(value: Union[str, int, None]) -> int:
    """Turn user input into an RNG seed, synthesising one for missing or malformed input."""

    if isinstance(value, bool):
        value = None
    if value is not None:
        seed: Optional[int] = None
        if isinstance(value, int):
            seed = value
        elif _SEED_RE.match(value.strip()):
            seed = int(value.strip(), 10)
        if seed is not None and _usable(seed):
            return seed
        logger.warning("Ignoring malformed seed %r; using a fresh seed", value)
    return int(generate_seed_string(), 10)


def _usable(seed: int) -> bool:
    """Non-negative and small enough to become a finite RNG state."""

    if seed < 0:
        return False
    try:
        return math.isfinite(float(seed) * 128)
    except OverflowError:
        return False


def seed_to_fragment(seed: int) -> str:
    return f"#{seed:0{SEED_LENGTH}d}"


def seed_from_fragment(location: str) -> Optional[int]:
    """Extract the seed from a ``...#<digits>`` location, or ``None`` if absent or malformed."""

    _, sep, fragment = location.partition("#")
    if not sep or not _SEED_RE.match(fragment):
        return None
    return int(fragment, 10)
