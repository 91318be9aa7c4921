# pwnedcheck/utils/config.py
"""
Configuration management for pwnedcheck.
Handles environment variables, default settings, and client configuration.
"""

import math
import os
from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass
class Config:
    """
    Client configuration with environment variable support.
    All settings can be overridden via environment variables.
    """

    # Range API Configuration
    api_url: str = "https://api.pwnedpasswords.com/range/"
    api_version: str = "2"
    user_agent: str = "pwnedcheck/1.0"
    timeout: float = 10.0
    add_padding: bool = False

    # Logging Configuration
    log_level: str = "INFO"
    log_file: Optional[str] = None
    enable_file_logging: bool = False

    # Web Interface Configuration
    server_host: str = "127.0.0.1"
    server_port: int = 7860
    share: bool = False
    debug: bool = False
    app_title: str = "pwnedcheck - Pwned Passwords Lookup"

    def __post_init__(self):
        """Load configuration from environment variables after initialization."""
        self._load_from_environment()
        self._validate_config()

    def _load_from_environment(self):
        """Load configuration values from environment variables."""

        # Range API
        self.api_url = os.getenv("PWNEDCHECK_API_URL", self.api_url)
        self.api_version = os.getenv("PWNEDCHECK_API_VERSION", self.api_version)
        self.user_agent = os.getenv("PWNEDCHECK_USER_AGENT", self.user_agent)
        self.timeout = float(os.getenv("PWNEDCHECK_TIMEOUT", self.timeout))
        self.add_padding = self._get_bool_env("PWNEDCHECK_ADD_PADDING", self.add_padding)

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", self.log_level).upper()
        self.log_file = os.getenv("LOG_FILE", self.log_file)
        self.enable_file_logging = self._get_bool_env("ENABLE_FILE_LOGGING", self.enable_file_logging)

        # Web interface
        self.server_host = os.getenv("PWNEDCHECK_HOST", self.server_host)
        self.server_port = int(os.getenv("PWNEDCHECK_PORT", self.server_port))
        self.share = self._get_bool_env("PWNEDCHECK_SHARE", self.share)
        self.debug = self._get_bool_env("PWNEDCHECK_DEBUG", self.debug)
        self.app_title = os.getenv("APP_TITLE", self.app_title)

    def _get_bool_env(self, key: str, default: bool) -> bool:
        """Get boolean value from environment variable."""
        value = os.getenv(key, str(default)).lower()
        return value in ('true', '1', 'yes', 'on')

    def _validate_config(self):
        """Validate configuration values."""

        # The prefix is appended directly to the base URL
        if not self.api_url.startswith(("http://", "https://")):
            raise ValueError(f"Invalid API URL: {self.api_url}")

        if not self.api_url.endswith("/"):
            raise ValueError(f"API URL must end with '/': {self.api_url}")

        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ValueError(f"Timeout must be a positive number of seconds: {self.timeout}")

        if not self.user_agent.strip():
            raise ValueError("User agent cannot be blank")

        if not (1 <= self.server_port <= 65535):
            raise ValueError(f"Invalid server port: {self.server_port}")

        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if self.log_level not in valid_levels:
            raise ValueError(f"Invalid log level: {self.log_level}. Must be one of {valid_levels}")

    def get_request_headers(self) -> Dict[str, str]:
        """Headers sent with every range request."""
        headers = {
            'api-version': self.api_version,
            'User-Agent': self.user_agent,
            'Accept': 'text/plain',
        }

        if self.add_padding:
            headers['Add-Padding'] = 'true'

        return headers

    def get_gradio_kwargs(self) -> Dict[str, Any]:
        """Get keyword arguments for Gradio launch configuration."""
        return {
            'server_name': self.server_host,
            'server_port': self.server_port,
            'share': self.share,
            'debug': self.debug,
            'show_error': True,
        }

    def get_log_file_path(self) -> Optional[str]:
        """Get the log file path based on configuration."""
        if not self.enable_file_logging:
            return None

        return self.log_file or "logs/pwnedcheck.log"

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return dict(self.__dict__)

    def __str__(self) -> str:
        """String representation of configuration."""
        lines = [f"{key}: {value}" for key, value in self.to_dict().items()]
        return "pwnedcheck Configuration:\n" + "\n".join(f"  {line}" for line in lines)


# Global configuration instance
_config_instance: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance (singleton pattern).

    Returns:
        Config: Global configuration instance
    """
    global _config_instance

    if _config_instance is None:
        _config_instance = Config()

    return _config_instance


def reload_config() -> Config:
    """
    Reload configuration from environment variables.

    Returns:
        Config: New configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
