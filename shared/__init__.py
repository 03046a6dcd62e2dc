"""
PassLens Shared Module
======================

Configuration, logging, console and result models shared by every
PassLens tool.
"""

from shared.config import LensConfig, get_config

__all__ = ["LensConfig", "get_config"]
