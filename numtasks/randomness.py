"""
Random integers from a shared, thread-safe generator.

**Conceptual**: get_random_integer is the one non-deterministic function in
the library. It draws from a single process-wide NumPy Generator
(np.random.default_rng), created lazily on first use and seeded from
NumericSettings.random_seed (OS entropy when unset).

**Thread safety**: NumPy Generators are not safe to share between threads
without synchronization, so every draw and every reseed holds a module
lock.

**Reproducibility**: seed_random_generator(seed) replaces the generator;
tests and experiments call it to get a repeatable sequence.
"""

import logging
import threading
from typing import Optional

import numpy as np

from numtasks.config.settings import get_settings
from numtasks.utils.errors import InvalidValueError
from numtasks.utils.validation import MAX_SAFE_INTEGER, require_integer

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_generator: Optional[np.random.Generator] = None


def seed_random_generator(seed: Optional[int] = None) -> None:
    """
    Replace the shared generator with a new one built from seed.

    Args:
        seed: Non-negative integer seed, or None to seed from OS entropy.
    """
    global _generator
    with _lock:
        _generator = np.random.default_rng(seed)
    logger.info("Random generator reseeded (seed=%s)", seed)


def _shared_generator() -> np.random.Generator:
    # Caller must hold _lock
    global _generator
    if _generator is None:
        seed = get_settings().random_seed
        _generator = np.random.default_rng(seed)
        logger.info("Random generator initialised (seed=%s)", seed)
    return _generator


def get_random_integer(min_value, max_value) -> int:
    """
    Return a uniformly distributed random integer in [min_value, max_value].

    Both bounds are inclusive: get_random_integer(-1, 1) returns -1, 0 or 1.
    Bounds must be safe integers (|n| <= 2^53 - 1).

    Args:
        min_value: Smallest value that may be returned.
        max_value: Largest value that may be returned.

    Returns:
        A random int k with min_value <= k <= max_value.

    Raises:
        TypeMismatchError: If a bound is not a number.
        InvalidValueError: If a bound is not a safe integer, or
                           min_value > max_value.
    """
    min_value = require_integer(
        min_value, "min_value", minimum=-MAX_SAFE_INTEGER, maximum=MAX_SAFE_INTEGER
    )
    max_value = require_integer(
        max_value, "max_value", minimum=-MAX_SAFE_INTEGER, maximum=MAX_SAFE_INTEGER
    )
    if min_value > max_value:
        raise InvalidValueError(
            "Invalid input: min should be less than or equal to max "
            f"(got min={min_value}, max={max_value})."
        )

    with _lock:
        value = _shared_generator().integers(min_value, max_value, endpoint=True)
    return int(value)
