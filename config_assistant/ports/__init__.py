from config_assistant.ports.connection_string_store import ConnectionStringStore
from config_assistant.ports.settings_store import SettingsStore

__all__ = ["ConnectionStringStore", "SettingsStore"]
