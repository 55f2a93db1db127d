"""
Configuration management for logo_presets.

Holds the optional user preset file path. The loader only consults a Config
when one is passed to it explicitly, and validates it before use.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from logo_presets.logging_config import get_logger
from logo_presets.utils.exceptions import ConfigurationError

logger = get_logger(__name__)

USER_PRESET_FILE_ENV = "LOGO_PRESETS_USER_FILE"


@dataclass
class Config:
    """Configuration for logo_presets."""

    # Path to a user preset JSON file; empty means built-ins only
    user_preset_path: str = ""

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create a Config instance from environment variables (and a .env file, if present).

        Environment variables:
            LOGO_PRESETS_USER_FILE: Optional path to a user preset file

        Returns:
            Config instance populated from environment
        """
        load_dotenv()
        return cls(user_preset_path=os.getenv(USER_PRESET_FILE_ENV, "").strip())

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ConfigurationError: If user_preset_path is set but is not an existing file
        """
        logger.debug("Validating config")

        if self.user_preset_path and not os.path.isfile(self.user_preset_path):
            raise ConfigurationError(
                f"User preset file not found: {self.user_preset_path}. "
                f"Check {USER_PRESET_FILE_ENV} or pass an existing path."
            )
