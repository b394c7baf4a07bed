"""
Core functionality for tfcomponents.

- Discovering components in a directory tree
- Reading component status from local state
- Running terraform inside a component
"""

from .discovery import Component, find_components
from .state_reader import ComponentStatus, StateSummary, get_status, read_state
from .terraform_runner import TerraformRunner

__all__ = [
    "Component",
    "find_components",
    "ComponentStatus",
    "StateSummary",
    "get_status",
    "read_state",
    "TerraformRunner",
]
