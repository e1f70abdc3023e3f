from .config import Settings
from .app import create_app

__all__ = ["Settings", "create_app"]
