"""
Validation utilities for tfcomponents.
"""

import os
import shutil

from ..errors import (
    ComponentNotFoundError,
    NotADirectoryComponentError,
    TerraformNotFoundError,
)


def resolve_terraform_binary(terraform_binary: str = "terraform") -> str:
    """
    Locate the Terraform executable.

    Args:
        terraform_binary: Name or path of the terraform binary

    Returns:
        Full path to the executable

    Raises:
        TerraformNotFoundError: If it is not on PATH
    """
    resolved = shutil.which(terraform_binary)
    if not resolved:
        raise TerraformNotFoundError(terraform_binary)
    return resolved


def resolve_component(component: str) -> str:
    """
    Check that a component argument names an existing directory.

    Args:
        component: Path given on the command line

    Returns:
        The path, unchanged

    Raises:
        ComponentNotFoundError: Nothing exists at the path
        NotADirectoryComponentError: The path is not a directory
    """
    if not component or not os.path.exists(component):
        raise ComponentNotFoundError(component)

    if not os.path.isdir(component):
        raise NotADirectoryComponentError(component)

    return component
