"""Configuration module for the charge point console.

Key Components:
- settings: Application configuration loaded from environment variables and TOML files
- Logging: Loguru-based logging configuration with development/production modes
- Error handling: Centralized error codes and user facing messages

The configuration supports multiple environments (development, testing, production)
and allows runtime configuration through environment variables while keeping
sensible defaults from the app.toml configuration file.
"""

from chargepoint_console.config.config import Settings, settings
from chargepoint_console.config.errors import ErrorCode, ErrorNames
from chargepoint_console.config.logger import config_logger

__all__ = ["ErrorCode", "ErrorNames", "Settings", "config_logger", "settings"]
