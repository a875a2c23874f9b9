"""Settings of the console gateway and its backend access."""

import tomllib
from pathlib import Path
from typing import Literal

from pydantic import Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "settings"]


_app_config_path = Path(__file__).parent / "resources" / "app.toml"

with Path.open(_app_config_path, "rb") as f:
    _app_config = tomllib.load(f).get("app", {})
    _server_config = _app_config.get("server", {})
    _backend_config = _app_config.get("backend", {})
    _log_config = _app_config.get("logging", {})


class Settings(BaseSettings):
    """Console settings, from ``app.toml`` overridden by environment variables."""

    app_env: Literal["development", "testing", "production"] = Field(
        default="development",
        description="Deployment environment of the console.",
        validation_alias="ENV",
    )

    # Gateway
    host_binding: str = Field(
        default=_server_config.get("host_binding", "127.0.0.1"),
        description="Host address the console gateway binds to.",
    )

    port: int = Field(
        default=_server_config.get("port", 8000),
        description="Network port the console gateway listens on.",
    )

    version: str = Field(
        default=_server_config.get("version", "0.1.0"),
        description="Console version shown by /info and the banner.",
    )

    root_path: str = Field(
        default=_server_config.get("root_path", ""),
        description="Root path when the gateway runs behind a proxy.",
    )

    allow_origin: list[str] = Field(
        default=_server_config.get("allow_origin", ["http://localhost:3000"]),
        description="Browser origins allowed outside production.",
    )

    # REST backend
    backend_url: str = Field(
        default=_backend_config.get("url", "http://localhost:8080"),
        description="Base URL of the charging station REST backend.",
        validation_alias="BACKEND_URL",
    )

    websocket_path: str = Field(
        default=_backend_config.get("websocket_path", "/websocket/chargepoint"),
        description="Path of the backend's charge point notification channel.",
    )

    current_user_path: str = Field(
        default=_backend_config.get("current_user_path", "/api/user/me"),
        description="Backend path returning the identity of the session user.",
    )

    page_size: int = Field(
        default=_backend_config.get("page_size", 10),
        ge=1,
        description="Default page length for incremental list loading.",
    )

    request_timeout: float | None = Field(
        default=None,
        description="Timeout in seconds for backend calls, unset means no timeout.",
        validation_alias="REQUEST_TIMEOUT",
    )

    # Logging
    log_dir: str = Field(
        default=_log_config.get("log_dir", "log"),
        description="Directory of the development log file.",
    )

    log_file: str = Field(
        default=_log_config.get("log_file", "app.log"),
        description="Name of the log file.",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Minimum level of emitted records.",
    )

    rotation: str = Field(
        default=_log_config.get("rotation", "10 MB"),
        description="Size or age at which the log file rotates.",
    )

    loki_url: str = Field(
        default=_log_config.get("loki_url", "http://alloy:9999/loki/api/v1/push"),
        description="Loki push endpoint receiving production logs.",
        validation_alias="LOKI_URL",
    )

    @computed_field
    @property
    def log_path(self) -> Path:
        """Development log file."""
        return Path(self.log_dir) / self.log_file

    @computed_field
    @property
    def reload(self) -> bool:
        """Auto-reload, only ever on in development."""
        return bool(_server_config.get("reload")) and self.app_env == "development"

    @computed_field
    @property
    def websocket_url(self) -> str:
        """Absolute URL of the charge point notification channel."""
        base = self.backend_url.rstrip("/")
        scheme, _, rest = base.partition("://")
        ws_scheme = "wss" if scheme == "https" else "ws"
        return f"{ws_scheme}://{rest}{self.websocket_path}"

    @model_validator(mode="after")
    def cap_production_log_level(self) -> "Settings":
        """Keep DEBUG records out of production."""
        if self.app_env == "production" and self.log_level == "DEBUG":
            self.log_level = "INFO"
        return self

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
