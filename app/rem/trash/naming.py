"""Collision disambiguation for trash names and ledger keys.

A candidate path that conflicts is retried with increasingly fine
timestamps appended, and finally with random numbers until it is free.
Every strategy works from the original candidate, never from a previous
attempt. The conflict test is injected, so the policy has no I/O of its
own and the same ladder serves both the trash directory (exists on disk)
and the ledger (key already recorded).
"""

import logging
import random
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime

logger = logging.getLogger(__name__)

# A strategy maps (candidate, now in ns since the epoch) to a new name.
NamingStrategy = Callable[[str, int], str]
ConflictCheck = Callable[[str], bool]
Clock = Callable[[], int]

_NS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True, slots=True)
class Disambiguation:
    """Outcome of disambiguating a candidate path.

    Attributes:
        path: Non-conflicting path.
        original: The candidate that was asked for.
    """

    path: str
    original: str

    @property
    def renamed(self) -> bool:
        """Whether the candidate had to be changed."""
        return self.path != self.original


def format_stamp(now_ns: int, digits: int = 0) -> str:
    """Format a timestamp like ``Oct 19 12:53:01`` with optional fraction.

    Args:
        now_ns: Nanoseconds since the epoch.
        digits: Fractional second digits (3 = ms, 6 = us, 9 = ns).

    Returns:
        Human-readable local timestamp.
    """
    seconds, fraction = divmod(now_ns, _NS_PER_SECOND)
    stamp = datetime.fromtimestamp(seconds).strftime("%b %d %H:%M:%S")
    if digits:
        stamp += "." + f"{fraction:09d}"[:digits]
    return stamp


def unchanged(candidate: str, now_ns: int) -> str:
    return candidate


def _stamped(digits: int) -> NamingStrategy:
    def strategy(candidate: str, now_ns: int) -> str:
        return f"{candidate} {format_stamp(now_ns, digits)}"

    strategy.__name__ = f"stamp_{digits}"
    return strategy


stamp_seconds = _stamped(0)
stamp_millis = _stamped(3)
stamp_micros = _stamped(6)
stamp_nanos = _stamped(9)


class RandomSuffix:
    """Append a random 63-bit integer.

    The generator is seeded from the clock on first use and then keeps
    drawing, so repeated calls yield different suffixes even when the
    clock has not moved.
    """

    def __init__(self) -> None:
        self._rng: random.Random | None = None

    def __call__(self, candidate: str, now_ns: int) -> str:
        if self._rng is None:
            self._rng = random.Random(now_ns)
        return f"{candidate} {self._rng.getrandbits(63)}"


random_suffix = RandomSuffix()


# Tried in order; the last one repeats until a free name turns up.
DEFAULT_STRATEGIES: tuple[NamingStrategy, ...] = (
    unchanged,
    stamp_seconds,
    stamp_millis,
    stamp_micros,
    stamp_nanos,
    random_suffix,
)


def disambiguate(
    candidate: str,
    conflicts: ConflictCheck,
    strategies: Sequence[NamingStrategy] = DEFAULT_STRATEGIES,
    clock: Clock = time.time_ns,
) -> Disambiguation:
    """Find a name derived from ``candidate`` that does not conflict.

    Args:
        candidate: Preferred path.
        conflicts: Returns True if a path is already taken.
        strategies: Naming strategies, tried in order. The last one is
            retried indefinitely.
        clock: Source of the current time in nanoseconds.

    Returns:
        Disambiguation holding the free path.

    Raises:
        ValueError: If no strategies are given.
    """
    if not strategies:
        msg = "At least one naming strategy is required"
        raise ValueError(msg)

    attempt = 0
    while True:
        strategy = strategies[min(attempt, len(strategies) - 1)]
        path = strategy(candidate, clock())
        if not conflicts(path):
            break
        attempt += 1
        if attempt >= len(strategies):
            logger.debug("Still conflicting after %d attempts: %s", attempt, path)

    result = Disambiguation(path=path, original=candidate)
    if result.renamed:
        logger.info("To avoid conflicts, %s will now be called %s", candidate, path)
    return result
