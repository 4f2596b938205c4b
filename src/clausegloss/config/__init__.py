"""Configuration loading for ClauseGloss.

Main components:
- ConfigLoader: Merge defaults, YAML files and CLAUSEGLOSS_* env overrides
- load_config: One-call helper for CLI commands
"""

from clausegloss.config.loader import ConfigLoader, load_config

__all__ = [
    "ConfigLoader",
    "load_config",
]
