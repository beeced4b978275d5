"""
Configuration module for the forker.

Exports the configuration models and loader functions.
"""

from .defaults import DEFAULT_FORK_OPTION, DEFAULT_TITLE
from .fork_config import ForkConfig
from .loader import get_config, load_config, load_config_file, merge_configs, strip_jsonc_comments
from .main_config import Config

__all__ = [
    # Constants
    "DEFAULT_FORK_OPTION",
    "DEFAULT_TITLE",
    # Config models
    "Config",
    "ForkConfig",
    # Loader functions
    "load_config",
    "get_config",
    "load_config_file",
    "merge_configs",
    "strip_jsonc_comments",
]
