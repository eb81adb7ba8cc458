from config_assistant.adapters.env_provider import EnvConnectionStringStore, EnvSettingsStore
from config_assistant.adapters.mapping_store import (
    MappingConnectionStringStore,
    MappingSettingsStore,
)

__all__ = [
    "EnvConnectionStringStore",
    "EnvSettingsStore",
    "MappingConnectionStringStore",
    "MappingSettingsStore",
]
