"""SettingsStore Port Interface.

Contract: Resolve a raw application setting by key from a flat key/string store.
"""

from __future__ import annotations

from typing import Optional, Protocol


class SettingsStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    """
    Return the raw string stored under ``key``, or ``None`` when the store has no
    such key. Keys are case-sensitive unless the backing store says otherwise.
    Implementations must not mutate anything on lookup.
    """
