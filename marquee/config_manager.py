import json
import os
import logging
from typing import Dict, Any, Optional

from marquee.config import MarqueeConfig
from marquee.exceptions import ConfigError
from marquee.logging_config import get_logger


class ConfigManager:
    def __init__(self, config_path: Optional[str] = None) -> None:
        self.config_path: Optional[str] = config_path
        self.config: Dict[str, Any] = {}
        self.logger: logging.Logger = get_logger(__name__)

    def load_config(self) -> Dict[str, Any]:
        """
        Load the JSON configuration file.

        A missing file (or no path at all) yields an empty configuration.

        Raises:
            ConfigError: If the file cannot be read or is not a JSON object
        """
        if not self.config_path or not os.path.exists(self.config_path):
            if self.config_path:
                self.logger.debug("Config file %s not found, using defaults", self.config_path)
            self.config = {}
            return self.config

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file: {e}", config_path=self.config_path) from e
        except (IOError, OSError) as e:
            raise ConfigError(f"Could not read config file: {e}", config_path=self.config_path) from e

        if not isinstance(loaded, dict):
            raise ConfigError("Config file must contain a JSON object", config_path=self.config_path)

        self.config = loaded
        self.logger.info("Loaded configuration from %s", os.path.abspath(self.config_path))
        return self.config

    def get_marquee_config(self) -> MarqueeConfig:
        """
        Build a validated MarqueeConfig from the loaded file.

        Raises:
            ConfigError: If a value cannot be converted or fails validation
        """
        try:
            marquee_config = MarqueeConfig.from_config(self.config)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid marquee settings: {e}", config_path=self.config_path) from e

        errors = marquee_config.validate()
        if errors:
            raise ConfigError("; ".join(errors), config_path=self.config_path)
        return marquee_config
