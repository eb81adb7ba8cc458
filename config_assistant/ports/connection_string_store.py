"""ConnectionStringStore Port Interface.

Contract: Resolve a named connection string; kept apart from general settings.
"""

from __future__ import annotations

from typing import Optional, Protocol


class ConnectionStringStore(Protocol):
    def get(self, name: str) -> Optional[str]: ...

    """
    Return the connection string registered under ``name``, or ``None`` when
    the store does not know the name.
    """
