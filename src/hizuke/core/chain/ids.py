"""Identity tokens for milestones inserted during a session."""

from __future__ import annotations

import random
import time
from collections.abc import Callable

from .models import GeneratedId

ID_SEPARATOR = "$"
_FRACTION_DIGITS = 13
_HEX_DIGITS = "0123456789abcdef"


def _fraction_to_base16(value: float, *, digits: int = _FRACTION_DIGITS) -> str:
    if value <= 0.0:
        return "0"
    emitted: list[str] = []
    remainder = value
    for _ in range(digits):
        remainder *= 16
        digit = int(remainder)
        emitted.append(_HEX_DIGITS[digit])
        remainder -= digit
        if remainder == 0.0:
            break
    fraction = "".join(emitted).rstrip("0")
    return f"0.{fraction}" if fraction else "0"


def new_id(
    *,
    clock: Callable[[], float] = time.time,
    rng: Callable[[], float] = random.random,
) -> GeneratedId:
    """
    Mint a list-identity token: `<epoch millis in hex>$<random fraction in hex>`.

    Tokens are never retried on collision; they only need to stay distinct
    among the milestones held by one session.
    """
    millis = int(clock() * 1000)
    return GeneratedId(f"{millis:x}{ID_SEPARATOR}{_fraction_to_base16(rng())}")
