"""Declaration of the root package chargepoint_console."""

from chargepoint_console.app import app
from chargepoint_console.server import run

__all__ = ["app", "main"]


def main() -> None:
    """Run the console gateway."""
    run()
