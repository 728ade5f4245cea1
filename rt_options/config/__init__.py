"""
Configuration management for Options records.

This module provides:
- load_options / save_options: JSON and YAML options files
- options_from_dict / options_to_dict: Dictionary conversion
- OptionsManager: Loading with per-profile validation
"""

from rt_options.config.settings import (
    load_options,
    options_from_dict,
    options_to_dict,
    save_options,
)
from rt_options.config.manager import LoadedOptions, OptionsManager

__all__ = [
    "load_options",
    "save_options",
    "options_from_dict",
    "options_to_dict",
    "LoadedOptions",
    "OptionsManager",
]
