"""
Typed, fail-fast access to application settings and connection strings.

Components:
- AppSettings: typed lookups, required lookups and delimited lists over a settings store
- ConnectionStrings: plain and required lookups over a connection-string store
- ConfigurationError: the single error type, told apart by ``kind``

Usage:
    from config_assistant import AppSettings, ConnectionStrings, Int32

    settings = AppSettings.from_environ(prefix="APPSETTING_")
    port = settings.get_required("Port", Int32)
    hosts = settings.split_and_get("Hosts")

    dsn = ConnectionStrings.from_environ().get_required("Primary")
"""

from config_assistant.adapters import (
    EnvConnectionStringStore,
    EnvSettingsStore,
    MappingConnectionStringStore,
    MappingSettingsStore,
)
from config_assistant.core import AppSettings, ConnectionStrings
from config_assistant.errors import ConfigurationError, ErrorKind
from config_assistant.types import (
    Int8,
    Int16,
    Int32,
    Int64,
    SplitOptions,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)

__all__ = [
    # Accessors
    "AppSettings",
    "ConnectionStrings",
    # Stores
    "EnvConnectionStringStore",
    "EnvSettingsStore",
    "MappingConnectionStringStore",
    "MappingSettingsStore",
    # Types
    "SplitOptions",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    # Errors
    "ConfigurationError",
    "ErrorKind",
]
