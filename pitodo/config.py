"""
Configuration for PiTodo.

Loads config.yaml and checks the sections the bootstrap depends on, so a bad
backend or bootstrap setting is reported as a misconfiguration at startup
instead of surfacing somewhere deeper.
"""

import logging
import os
from typing import Any, Dict, Optional

import yaml

BACKEND_KINDS = ('http', 'static')
FAILURE_POLICIES = ('fail_visible', 'silent_degrade')


class ConfigError(ValueError):
    """A configuration value the application cannot start with"""


def _expand(value: Any) -> Any:
    """Expand ~ and $VARS in every string of a parsed YAML tree"""
    if isinstance(value, dict):
        return {key: _expand(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand(item) for item in value]
    if isinstance(value, str) and ('$' in value or '~' in value):
        return os.path.expandvars(os.path.expanduser(value))
    return value


class Config:
    """
    Application configuration
    """

    def __init__(self, config_path: Optional[str] = None, data: Optional[Dict] = None):
        """
        Load configuration from a YAML file or an already parsed dictionary

        Args:
            config_path: Path to config.yaml
            data: Configuration dictionary (used instead of a file when given)

        Raises:
            FileNotFoundError: If no data is given and the file is missing
            ConfigError: If the file does not hold a mapping
        """
        self.logger = logging.getLogger(__name__)

        if data is None:
            if not config_path or not os.path.exists(config_path):
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            with open(config_path, 'r') as f:
                data = yaml.safe_load(f) or {}
            self.logger.info(f"Configuration loaded from {config_path}")

        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping of sections")
        self._config = _expand(data)

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation

        Args:
            path: Configuration path (e.g., 'display.width')
            default: Default value if path doesn't exist
        """
        value = self._config
        for key in path.split('.'):
            if not isinstance(value, dict) or key not in value:
                return default
            value = value[key]
        return value

    def section(self, name: str) -> Dict[str, Any]:
        """Return a copy of a top-level section, or an empty dict"""
        value = self._config.get(name)
        return dict(value) if isinstance(value, dict) else {}

    def backend(self) -> Dict[str, Any]:
        """
        The 'backend' section with kind and timeout checked

        Raises:
            ConfigError: For an unknown kind or a non-numeric/non-positive timeout
        """
        section = self.section('backend')

        kind = str(section.get('kind', 'http')).lower()
        if kind not in BACKEND_KINDS:
            raise ConfigError(f"Unknown backend kind: {kind!r} (expected one of {', '.join(BACKEND_KINDS)})")
        section['kind'] = kind

        try:
            timeout = float(section.get('timeout', 5.0))
        except (TypeError, ValueError):
            raise ConfigError(f"Invalid backend timeout: {section.get('timeout')!r}") from None
        if timeout <= 0:
            raise ConfigError(f"Backend timeout must be positive, got {timeout}")
        section['timeout'] = timeout

        return section

    def failure_policy(self) -> str:
        """
        bootstrap.failure_policy, checked

        Raises:
            ConfigError: For an unknown policy
        """
        policy = str(self.get('bootstrap.failure_policy', 'fail_visible')).lower()
        if policy not in FAILURE_POLICIES:
            raise ConfigError(f"Unknown bootstrap failure_policy: {policy!r}")
        return policy
