"""
Config system - typed dispatch configuration with layered loading.

Merge precedence (later overrides earlier):
defaults < .env file < environment variables < manual overrides
"""

from typing import Any, Dict, Optional
from dataclasses import dataclass, fields, replace
from pathlib import Path
import logging
import os

from dotenv import dotenv_values

from .faults import ConfigInvalidFault


logger = logging.getLogger("harrier.config")


@dataclass(frozen=True)
class DispatchConfig:
    """
    Dispatch configuration.

    Attributes:
        controller_suffix: Suffix stripped from controller type names when
            deriving the short controller name
        record_metadata: Attach controller/action names to responses that
            support it
        strict_actions: Reject unknown action names when a handler is
            created instead of when it is first invoked
        redirect_status: Default status code for ``Controller.redirect``
    """

    controller_suffix: str = "controller"
    record_metadata: bool = True
    strict_actions: bool = True
    redirect_status: int = 302

    def __post_init__(self):
        if not self.controller_suffix:
            raise ConfigInvalidFault("controller_suffix", "must not be empty")
        if not 300 <= self.redirect_status < 400:
            raise ConfigInvalidFault(
                "redirect_status",
                f"{self.redirect_status} is not a 3xx status code",
            )

    def with_overrides(self, **overrides: Any) -> "DispatchConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)


class ConfigLoader:
    """
    Loads and merges dispatch configuration from multiple sources.

    Environment keys are the field name upper-cased behind the prefix,
    e.g. ``HARRIER_STRICT_ACTIONS=false``. Prefixed variables that name no
    field are ignored; unknown keys in ``overrides`` are rejected.
    """

    def __init__(self, env_prefix: str = "HARRIER_"):
        self.env_prefix = env_prefix
        self.config_data: Dict[str, Any] = {}

    @classmethod
    def load(
        cls,
        env_prefix: str = "HARRIER_",
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> DispatchConfig:
        """
        Load configuration with proper merge strategy.

        Args:
            env_prefix: Prefix for environment variables
            env_file: Path to .env file
            overrides: Manual overrides (highest precedence)

        Returns:
            Validated DispatchConfig
        """
        loader = cls(env_prefix=env_prefix)

        if env_file:
            loader._load_env_file(env_file)

        loader._load_from_env()

        if overrides:
            loader.config_data.update(overrides)

        return loader.build()

    def _load_env_file(self, path: str):
        """Load config from .env file."""
        env_path = Path(path)
        if not env_path.exists():
            logger.debug("env file %s not found, skipping", env_path)
            return

        for key, value in dotenv_values(env_path).items():
            if key.startswith(self.env_prefix) and value is not None:
                self._set(key, value)

    def _load_from_env(self):
        """Load config from environment variables."""
        for key, value in os.environ.items():
            if key.startswith(self.env_prefix):
                self._set(key, value)

    def _set(self, key: str, value: str):
        name = key[len(self.env_prefix):].lower()
        if name not in {f.name for f in fields(DispatchConfig)}:
            # Other tools may share the prefix (HARRIER_HOME, ...).
            logger.debug("Ignoring %s: not a dispatch setting", key)
            return
        self.config_data[name] = self._parse_value(value)

    def _parse_value(self, value: str) -> Any:
        """Parse string value to appropriate type."""
        if value.lower() in ("true", "yes", "on"):
            return True
        if value.lower() in ("false", "no", "off"):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        return value

    def build(self) -> DispatchConfig:
        """Validate merged data and build the config object."""
        known = {f.name: f for f in fields(DispatchConfig)}
        values: Dict[str, Any] = {}

        for key, value in self.config_data.items():
            field_info = known.get(key)
            if field_info is None:
                raise ConfigInvalidFault(key, "unknown configuration key")

            expected = field_info.type if isinstance(field_info.type, type) else type(field_info.default)
            if expected is bool and not isinstance(value, bool):
                raise ConfigInvalidFault(key, f"expected a boolean, got {value!r}")
            if expected is int and (isinstance(value, bool) or not isinstance(value, int)):
                raise ConfigInvalidFault(key, f"expected an integer, got {value!r}")
            if expected is str:
                value = str(value)

            values[key] = value

        return DispatchConfig(**values)
