"""HTTP server built from the application config."""

from mega.server.app import create_app
from mega.server.server import Server

__all__ = ["Server", "create_app"]
