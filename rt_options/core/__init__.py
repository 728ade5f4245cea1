"""
Core constants shared by the options record and its sub-inputs.
"""

from rt_options.core import constants

__all__ = ["constants"]
