from __future__ import annotations

import logging
from typing import Optional

from config_assistant.adapters.env_provider import EnvConnectionStringStore
from config_assistant.core.utility import is_blank
from config_assistant.errors.errors import ConfigurationError
from config_assistant.ports.connection_string_store import ConnectionStringStore

_LOGGER = logging.getLogger(__name__)


class ConnectionStrings:
    """Access to named connection strings. Values are returned as stored, never converted."""

    def __init__(self, store: ConnectionStringStore) -> None:
        self._store = store

    @classmethod
    def from_environ(cls, prefix: str = "CONNSTR_") -> ConnectionStrings:
        return cls(EnvConnectionStringStore(prefix=prefix))

    @property
    def store(self) -> ConnectionStringStore:
        return self._store

    def get(self, name: str) -> Optional[str]:
        connection_string = self._store.get(name)
        _LOGGER.debug(
            "connection_string_resolved",
            extra={
                "event": "connection_string_resolved",
                "connection_name": name,
                "found": connection_string is not None,
            },
        )
        return connection_string

    def get_required(self, name: str) -> str:
        """Return the connection string; raise if it is missing, empty or whitespace-only."""
        connection_string = self.get(name)
        if is_blank(connection_string):
            raise ConfigurationError.missing_connection_string(name)
        return connection_string
