"""Configuration base classes."""

from abc import abstractmethod
from typing import Any, Mapping, Optional

from ..core.error import BaseError


class ConfigError(BaseError):
    """A base exception for all configuration errors."""


class SettingsError(ConfigError):
    """A setting is present but cannot be read as the requested type."""


class InjectorError(ConfigError):
    """No usable instance is bound for a requested class."""


class BaseSettings(Mapping[str, Any]):
    """Read access to dotted settings keys, with typed getters."""

    @abstractmethod
    def get_value(self, *var_names, default: Optional[Any] = None) -> Any:
        """Return the value of the first defined name in `var_names`, else `default`."""

    def get_int(self, *var_names, default: Optional[int] = None) -> Optional[int]:
        """Fetch a setting as an integer, raising `SettingsError` if it is not one."""
        value = self.get_value(*var_names, default=default)
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError) as err:
            raise SettingsError(
                f"Setting {var_names[0]} is not an integer: {value}"
            ) from err

    def get_str(self, *var_names, default: Optional[str] = None) -> Optional[str]:
        """Fetch a setting as a string."""
        value = self.get_value(*var_names, default=default)
        return None if value is None else str(value)

    def __getitem__(self, key):
        """Look up one key, raising `KeyError` when it is not set."""
        if key not in self:
            raise KeyError(key)
        return self.get_value(key)
