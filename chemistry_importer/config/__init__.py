import copy
import logging
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "importer": {
        "formats": ["XYZ", "Gaussian Cube", "UNEX", "Cfour", "MDL Mol V2000"],
    },
    "output": {
        "mode": "pretty",
        "indent": 2,
    },
    "batch": {
        "pattern": "*",
        "progress": True,
    },
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "console": True,
        "file": None,
    },
}

ENV_LOG_LEVEL = "CHEMISTRY_IMPORTER_LOG_LEVEL"
ENV_FORMATS = "CHEMISTRY_IMPORTER_FORMATS"


class ConfigManager:
    """Manages configuration settings for the chemistry importer."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to a YAML configuration file. If None, the default configuration is used.
        """
        self.config_dir = Path(__file__).parent.resolve()
        self.default_config_path = self.config_dir / "default_config.yaml"
        self.user_config_path = Path(config_path).expanduser() if config_path else None
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from defaults, the packaged YAML file, a user file and the environment."""
        config = copy.deepcopy(DEFAULT_CONFIG)

        if self.default_config_path.exists():
            with open(self.default_config_path, 'r') as f:
                packaged = yaml.safe_load(f) or {}
            self._deep_update(config, packaged)
        else:
            logger.debug(f"Packaged configuration not found at {self.default_config_path}, using defaults")

        # Override with user configuration if provided
        if self.user_config_path:
            if not self.user_config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {self.user_config_path}")
            with open(self.user_config_path, 'r') as f:
                user_config = yaml.safe_load(f) or {}
            if not isinstance(user_config, dict):
                raise ValueError(f"Configuration file {self.user_config_path} must contain a mapping")
            self._deep_update(config, user_config)
            logger.debug(f"Loaded user configuration from {self.user_config_path}")

        # Override with environment variables
        self._update_from_env(config)

        return config

    def _deep_update(self, d: Dict[str, Any], u: Dict[str, Any]) -> None:
        """Recursively update a dictionary."""
        for k, v in u.items():
            if isinstance(v, dict) and k in d and isinstance(d[k], dict):
                self._deep_update(d[k], v)
            else:
                d[k] = v

    def _update_from_env(self, config: Dict[str, Any]) -> None:
        """Update configuration with environment variables."""
        if ENV_LOG_LEVEL in os.environ:
            config.setdefault('logging', {})['level'] = os.environ[ENV_LOG_LEVEL]

        if ENV_FORMATS in os.environ:
            names = [n.strip() for n in os.environ[ENV_FORMATS].split(',') if n.strip()]
            config.setdefault('importer', {})['formats'] = names

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-separated path.

        Args:
            key_path: Dot-separated path to the configuration key (e.g., 'logging.level')
            default: Default value to return if the key is not found

        Returns:
            The configuration value or the default value if the key is not found
        """
        keys = key_path.split('.')
        value = self.config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get a complete configuration section.

        Args:
            section: Top-level section name

        Returns:
            The configuration section as a dictionary
        """
        return self.config.get(section, {})


def load_config(config_path: Optional[str] = None) -> ConfigManager:
    """Build a configuration manager, optionally layering a user YAML file."""
    return ConfigManager(config_path)

