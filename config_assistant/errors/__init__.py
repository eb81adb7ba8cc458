from config_assistant.errors.errors import ConfigurationError, ErrorKind

__all__ = ["ConfigurationError", "ErrorKind"]
