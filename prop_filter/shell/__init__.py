"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- Property dataset loading (JSON file)
- Configuration loading (YAML file/environment)
- Interactive prompts (terminal)

Keep this layer thin and simple. All business logic should be in core.
"""

from prop_filter.shell.config_loader import load_config, apply_env_overrides
from prop_filter.shell.dataset_loader import DatasetLoadError, load_properties
from prop_filter.shell.prompts import Action, InvalidInputError, Prompter

__all__ = [
    "load_config",
    "apply_env_overrides",
    "DatasetLoadError",
    "load_properties",
    "Action",
    "InvalidInputError",
    "Prompter",
]
