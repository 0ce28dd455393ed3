# backend/config/__init__.py
from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
