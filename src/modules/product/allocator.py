"""Random product code allocation over a small, finite code space.

Allocation is a pure function of the supplied code set and a random source.
It does not make a code unique in storage; the caller commits the code and
relies on the store's unique constraint, retrying with a fresh view on
conflict.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Collection
from typing import Protocol

from src.exceptions import AllocationExhaustedException
from src.modules.product.constants import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_SPACE_SIZE,
    MAX_CODE_SPACE_SIZE,
    PRODUCT_CODE_DIGITS,
    PRODUCT_CODE_PREFIX,
    PRODUCT_CODE_REGEX,
)

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def format_product_code(number: int) -> str:
    """Render ``number`` as a product code, e.g. 7 -> ``#LT007``."""
    if not 1 <= number <= MAX_CODE_SPACE_SIZE:
        raise ValueError(f"Product code number out of range: {number}")
    return f"{PRODUCT_CODE_PREFIX}{number:0{PRODUCT_CODE_DIGITS}d}"


def is_product_code(value: str) -> bool:
    return bool(PRODUCT_CODE_REGEX.match(value or ""))


def allocate(
    existing_codes: Collection[str],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    space_size: int = DEFAULT_SPACE_SIZE,
    rng: RandomSource | None = None,
) -> str:
    """Return a product code not present in ``existing_codes``.

    Draws at most ``max_attempts`` uniform candidates from ``[1, space_size]``
    and raises :class:`AllocationExhaustedException` if every one collides.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be positive, got {max_attempts}")
    if not 1 <= space_size <= MAX_CODE_SPACE_SIZE:
        raise ValueError(f"space_size must be within 1..{MAX_CODE_SPACE_SIZE}, got {space_size}")

    source = rng if rng is not None else random
    for attempt in range(1, max_attempts + 1):
        code = format_product_code(source.randint(1, space_size))
        if code not in existing_codes:
            if attempt > 1:
                logger.debug("Allocated %s after %d attempts", code, attempt)
            return code

    logger.warning(
        "Product code allocation exhausted: %d attempts, %d of %d codes in use",
        max_attempts, len(existing_codes), space_size,
    )
    raise AllocationExhaustedException(max_attempts, space_size)
