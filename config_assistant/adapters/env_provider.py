from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from config_assistant.ports.connection_string_store import ConnectionStringStore
from config_assistant.ports.settings_store import SettingsStore

_LOGGER = logging.getLogger(__name__)


class EnvSettingsStore(SettingsStore):
    def __init__(self, prefix: str = "", environ: Optional[Mapping[str, str]] = None) -> None:
        """
        Resolve settings from environment variables named ``<prefix><key>``.

        ``environ`` defaults to ``os.environ`` and is read at lookup time, so
        values set after construction are visible.
        """

        self._prefix = prefix
        self._environ = os.environ if environ is None else environ

    @property
    def prefix(self) -> str:
        return self._prefix

    def get(self, key: str) -> Optional[str]:
        env_var = f"{self._prefix}{key}"
        value = self._environ.get(env_var)
        _LOGGER.debug(
            "env_setting_lookup",
            extra={
                "event": "env_setting_lookup",
                "key": key,
                "env_var": env_var,
                "found": value is not None,
            },
        )
        return value


class EnvConnectionStringStore(ConnectionStringStore):
    def __init__(
        self, prefix: str = "CONNSTR_", environ: Optional[Mapping[str, str]] = None
    ) -> None:
        """
        Resolve connection strings from environment variables named ``<prefix><name>``.

        The prefix keeps connection strings apart from general settings, so it
        must be non-empty.
        """

        if not prefix:
            raise ValueError("Environment prefix must be a non-empty string")
        self._prefix = prefix
        self._environ = os.environ if environ is None else environ

    @property
    def prefix(self) -> str:
        return self._prefix

    def get(self, name: str) -> Optional[str]:
        env_var = f"{self._prefix}{name}"
        value = self._environ.get(env_var)
        # never log the value itself; connection strings carry credentials
        _LOGGER.debug(
            "env_connection_string_lookup",
            extra={
                "event": "env_connection_string_lookup",
                "connection_name": name,
                "env_var": env_var,
                "found": value is not None,
            },
        )
        return value
