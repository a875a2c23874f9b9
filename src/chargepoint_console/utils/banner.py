"""Startup banner of the console gateway."""

import platform
import sys
from datetime import UTC, datetime

from pyfiglet import figlet_format

from chargepoint_console.config.config import Settings

__all__ = ["create_banner"]


_RESET = "\033[0m"
_TITLE = "\033[1;33m"
_RULE = f"\033[0;37m{'-' * 60}{_RESET}"

type Section = tuple[str, list[tuple[str, object]]]


def _sections(settings: Settings) -> list[Section]:
    base = f"http://{settings.host_binding}:{settings.port}{settings.root_path}"
    timeout = settings.request_timeout
    in_development = settings.app_env == "development"

    return [
        (
            "Gateway",
            [
                ("Environment", settings.app_env),
                ("Listening", base),
                ("Docs", f"{base}/docs"),
                ("Metrics", f"{base}/metrics"),
            ],
        ),
        (
            "Backend",
            [
                ("URL", settings.backend_url),
                ("Notifications", settings.websocket_url),
                ("Page size", settings.page_size),
                ("Timeout", f"{timeout}s" if timeout else "none"),
            ],
        ),
        (
            "Logging",
            [
                ("Level", settings.log_level),
                ("File", settings.log_path if in_development else "none"),
            ],
        ),
        (
            "System",
            [
                ("Python", sys.version.split()[0]),
                ("OS", f"{platform.system()} {platform.release()}"),
                ("Reload", "on" if settings.reload else "off"),
                ("Started", datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")),
            ],
        ),
    ]


def create_banner(settings: Settings, silent: bool = False) -> str:
    """Render the startup banner and print it unless ``silent``.

    Returns:
        The banner text.
    """
    lines = [
        "\033[1;36m" + figlet_format("CHARGEPOINT", font="slant") + _RESET,
        f"{_TITLE}Charge Point Console v{settings.version}{_RESET}",
        _RULE,
    ]
    for title, rows in _sections(settings):
        lines.append(f"{_TITLE}{title}{_RESET}")
        lines.extend(f"  {label:<14}{value}" for label, value in rows)
    lines.append(_RULE)

    text = "\n".join(lines)
    if not silent:
        print(text)  # noqa: T201
    return text
