"""Entry Log - pure FIFO-capped append and recency window over a list of entries.

Invariants:
    - append_capped never returns more than `cap` entries
    - Eviction drops the OLDEST entries (front of the list) first
    - recent_window returns newest first and never mutates its input
"""

from typing import Sequence

from zodiac_api.core.domain_types import Entry


def append_capped(entries: Sequence[Entry], entry: Entry, cap: int) -> list[Entry]:
    """Return a new list with `entry` appended, trimmed to the last `cap` items."""
    if cap < 1:
        raise ValueError(f"cap must be >= 1, got {cap}")
    updated = [*entries, entry]
    overflow = len(updated) - cap
    if overflow > 0:
        del updated[:overflow]
    return updated


def recent_window(entries: Sequence[Entry], n: int) -> list[Entry]:
    """Last `n` entries, most-recently-added first."""
    if n <= 0:
        return []
    return list(reversed(entries[-n:]))
