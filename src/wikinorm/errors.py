"""Exception types raised by wikinorm."""


class ConfigError(ValueError):
    """Raised when a wikinorm.toml file contains an invalid setting."""
