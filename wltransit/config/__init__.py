#!/usr/bin/env python3
"""
Config module for filter and exception list configuration.
"""

from .collect_config import load_collect_config
from .exceptions_config import load_xlist_overlay

__all__ = ['load_collect_config', 'load_xlist_overlay']
