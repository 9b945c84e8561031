"""Configuration loader."""

from typing import Any, Optional

import yaml

from log import get_logger
from models.config import APIKeyHeaderConfiguration, Configuration

logger = get_logger(__name__)


class LogicError(Exception):
    """Error in application logic."""


class AppConfig:
    """Singleton class to load and store the configuration."""

    _instance = None

    def __new__(cls, *args: Any, **kwargs: Any) -> "AppConfig":
        """Create a new instance of the class."""
        if not isinstance(cls._instance, cls):
            cls._instance = super().__new__(cls, *args, **kwargs)
        return cls._instance

    def __init__(self) -> None:
        """Initialize the class instance."""
        self._configuration: Optional[Configuration] = None

    def load_configuration(self, filename: str) -> None:
        """Load configuration from YAML file.

        Parameters:
            filename (str): Path to the YAML configuration file to load.
        """
        with open(filename, encoding="utf-8") as fin:
            config_dict = yaml.safe_load(fin)
        self.init_from_dict(config_dict)
        logger.info("Loaded configuration: %s", self._configuration)

    def init_from_dict(self, config_dict: dict[Any, Any]) -> None:
        """Initialize configuration from a dictionary.

        Parameters:
            config_dict (dict[Any, Any]): Mapping of configuration values
            (typically parsed from YAML) used to construct a new
            Configuration instance.
        """
        self._configuration = Configuration(**config_dict)

    @property
    def configuration(self) -> Configuration:
        """Return the whole configuration.

        Raises:
            LogicError: If the configuration has not been loaded.
        """
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration

    @property
    def api_key_header_configuration(self) -> APIKeyHeaderConfiguration:
        """Return API key header configuration.

        Raises:
            LogicError: If the configuration has not been loaded.
        """
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration.api_key_header


configuration: AppConfig = AppConfig()
