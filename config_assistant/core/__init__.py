from config_assistant.core.app_settings import AppSettings
from config_assistant.core.connection_strings import ConnectionStrings
from config_assistant.core.conversion import change_type, default_for

__all__ = ["AppSettings", "ConnectionStrings", "change_type", "default_for"]
