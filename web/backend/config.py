#!/usr/bin/env python3
"""
Configuration access for the InternLink web application.

The configuration models live in core.config_loader; this module exposes
the cached accessor to the routers.
"""

from core.config_loader import AppConfig, get_config

__all__ = ['AppConfig', 'get_config']
