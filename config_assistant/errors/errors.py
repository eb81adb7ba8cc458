"""
Configuration errors.

Every failure of the accessors surfaces as a single ``ConfigurationError``;
``kind`` tells the categories apart:
- MISSING_SETTING: a required setting is absent or blank
- MISSING_CONNECTION_STRING: a required connection string is absent or blank
- INVALID_CAST: no conversion path exists to the target type
- BAD_FORMAT: the text does not match the target type's format
- OVERFLOW: the value parses but exceeds the target type's range
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    MISSING_SETTING = "missing_setting"
    MISSING_CONNECTION_STRING = "missing_connection_string"
    INVALID_CAST = "invalid_cast"
    BAD_FORMAT = "bad_format"
    OVERFLOW = "overflow"


CONVERSION_KINDS = frozenset({ErrorKind.INVALID_CAST, ErrorKind.BAD_FORMAT, ErrorKind.OVERFLOW})


class ConfigurationError(Exception):
    """Raised when a setting or connection string is missing or cannot be converted."""

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind,
        key: str,
        target_type: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.kind = kind
        self.key = key
        self.target_type = target_type
        details = dict(details or {})
        details["key"] = key
        if target_type:
            details["target_type"] = target_type
        self.details = details
        super().__init__(message)

    @property
    def message(self) -> str:
        return super().__str__()

    def __str__(self) -> str:
        return f"{self.message} [kind={self.kind.value}]"

    # --- Constructors ---

    @classmethod
    def missing_setting(cls, key: str) -> ConfigurationError:
        return cls(
            f"The required setting '{key}' was not found in the application settings.",
            kind=ErrorKind.MISSING_SETTING,
            key=key,
        )

    @classmethod
    def missing_connection_string(cls, name: str) -> ConfigurationError:
        return cls(
            f"A connection string does not exist in the configuration with the name '{name}'.",
            kind=ErrorKind.MISSING_CONNECTION_STRING,
            key=name,
        )

    @classmethod
    def conversion(
        cls,
        kind: ErrorKind,
        key: str,
        target_type: str,
        details: Optional[dict[str, Any]] = None,
    ) -> ConfigurationError:
        if kind not in CONVERSION_KINDS:
            raise ValueError(f"{kind!r} is not a conversion error kind")
        if kind is ErrorKind.INVALID_CAST:
            message = f"The setting value with the key '{key}' could not be parsed as {target_type}."
        elif kind is ErrorKind.BAD_FORMAT:
            message = f"The setting value with the key '{key}' is in the wrong format for {target_type}."
        else:
            message = (
                f"An overflow occurred trying to convert the setting with the key '{key}' "
                f"to type {target_type}."
            )
        return cls(message, kind=kind, key=key, target_type=target_type, details=details)
