"""
Configuration module for the semantic guard.
"""
from .constants import *
from .logger import get_logger, logger
from .settings import Settings, settings

__all__ = ["Settings", "settings", "get_logger", "logger"]
