"""Settings implementation."""

from typing import Mapping

from .base import BaseSettings

DEFAULT_RESOLVER_ENDPOINT = "https://dev.uniresolver.io"
DEFAULT_RESOLVER_TIMEOUT = 30
DEFAULT_VERIFIER_ADMIN_URL = "http://localhost:8031"
DEFAULT_PARTNER_LOOKUP_TTL = 3600


class Settings(BaseSettings):
    """Dictionary backed settings, filled in by the context builder."""

    def __init__(self, values: Mapping[str, object] = None):
        self._values = dict(values or {})

    def get_value(self, *var_names, default=None):
        for name in var_names:
            if name in self._values:
                return self._values[name]
        return default

    def set_value(self, var_name: str, value):
        """Store a setting under a non-empty string name."""
        if not isinstance(var_name, str) or not var_name:
            raise ValueError("Setting name must be a non-empty string")
        self._values[var_name] = value

    def set_default(self, var_name: str, value):
        """Store a setting unless it already has a value."""
        if var_name not in self._values:
            self.set_value(var_name, value)

    def __contains__(self, key):
        return key in self._values

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)
