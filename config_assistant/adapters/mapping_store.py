"""In-memory stores backed by a plain mapping."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from config_assistant.ports.connection_string_store import ConnectionStringStore
from config_assistant.ports.settings_store import SettingsStore


class MappingSettingsStore(SettingsStore):
    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        # snapshot; later changes to the caller's dict are not visible
        self._values: Mapping[str, str] = MappingProxyType(dict(values or {}))

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values


class MappingConnectionStringStore(ConnectionStringStore):
    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        self._values: Mapping[str, str] = MappingProxyType(dict(values or {}))

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values
