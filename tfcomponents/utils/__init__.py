"""
Utility functions for tfcomponents.
"""

from .logger import setup_logging
from .validators import resolve_component, resolve_terraform_binary

__all__ = ["setup_logging", "resolve_component", "resolve_terraform_binary"]
