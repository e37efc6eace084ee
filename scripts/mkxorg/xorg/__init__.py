"""Xorg configuration module."""

from .manager import XorgConfigManager
from .cli import main

__all__ = ['XorgConfigManager', 'main']
