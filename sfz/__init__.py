"""Static file server with HTML directory listings."""

__version__ = "0.1.0"

from .api import create_app
from .config import ServerConfig, server_config

__all__ = ["__version__", "create_app", "ServerConfig", "server_config"]
