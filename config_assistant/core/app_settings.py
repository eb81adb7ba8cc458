from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar, overload

from config_assistant.adapters.env_provider import EnvSettingsStore
from config_assistant.core.conversion import change_type, default_for, type_name
from config_assistant.core.utility import is_blank, split_text
from config_assistant.errors.errors import ConfigurationError
from config_assistant.ports.settings_store import SettingsStore
from config_assistant.types.types import SplitOptions

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET: Any = object()


class AppSettings:
    """
    Typed access to the application settings store.

    Missing or blank values come back as the target type's default from ``get``
    and raise ``ConfigurationError`` (MISSING_SETTING) from ``get_required``.
    Present values are converted with ``change_type``.
    """

    def __init__(self, store: SettingsStore) -> None:
        self._store = store

    @classmethod
    def from_environ(cls, prefix: str = "") -> AppSettings:
        return cls(EnvSettingsStore(prefix=prefix))

    @property
    def store(self) -> SettingsStore:
        return self._store

    # --- single values ---------------------------------------

    @overload
    def get(self, key: str) -> str: ...

    @overload
    def get(self, key: str, target: type[T], default: T = ...) -> T: ...

    @overload
    def get(self, key: str, target: Any, default: Any = ...) -> Any: ...

    def get(self, key: str, target: Any = str, default: Any = _UNSET) -> Any:
        raw = self._lookup(key)
        if is_blank(raw):
            return default_for(target) if default is _UNSET else default
        return change_type(raw, target, key)

    @overload
    def get_required(self, key: str) -> str: ...

    @overload
    def get_required(self, key: str, target: type[T]) -> T: ...

    @overload
    def get_required(self, key: str, target: Any) -> Any: ...

    def get_required(self, key: str, target: Any = str) -> Any:
        raw = self._lookup(key)
        if is_blank(raw):
            raise ConfigurationError.missing_setting(key)
        return change_type(raw, target, key)

    # --- delimited values ------------------------------------

    @overload
    def split_and_get(
        self,
        key: str,
        target: type[T],
        delimiter: str = ...,
        options: SplitOptions = ...,
    ) -> list[T]: ...

    @overload
    def split_and_get(
        self,
        key: str,
        target: Any = ...,
        delimiter: str = ...,
        options: SplitOptions = ...,
    ) -> list[Any]: ...

    def split_and_get(
        self,
        key: str,
        target: Any = str,
        delimiter: str = ";",
        options: SplitOptions = SplitOptions.REMOVE_EMPTY_ENTRIES,
    ) -> list[Any]:
        """
        Split the setting on ``delimiter`` and convert every segment to ``target``.

        A missing or blank setting yields an empty list. Order follows the raw
        value; the first segment that fails conversion raises and no partial
        list is returned. ``options`` decides whether empty segments are dropped
        (``REMOVE_EMPTY_ENTRIES``) or converted like any other (``NONE``).
        """
        raw = self._lookup(key)
        if is_blank(raw):
            return []

        segments = split_text(raw, delimiter)
        if SplitOptions(options) is SplitOptions.REMOVE_EMPTY_ENTRIES:
            segments = [segment for segment in segments if segment != ""]

        _LOGGER.debug(
            "setting_split",
            extra={
                "event": "setting_split",
                "key": key,
                "target_type": type_name(target),
                "segments": len(segments),
            },
        )
        return [change_type(segment, target, key) for segment in segments]

    # --- helpers ---------------------------------------------

    def _lookup(self, key: str) -> Optional[str]:
        raw = self._store.get(key)
        if is_blank(raw):
            _LOGGER.debug("setting_missing", extra={"event": "setting_missing", "key": key})
        else:
            _LOGGER.debug("setting_resolved", extra={"event": "setting_resolved", "key": key})
        return raw
