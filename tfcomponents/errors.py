"""
Error types for tfcomponents.

Two tiers: user errors are expected and actionable (exit code 1),
internal errors mean something the tool relies on went wrong
(exit code 2).
"""

from typing import Optional


class TfComponentsError(Exception):
    """Base class for all tfcomponents errors."""
    exit_code = 1


class UserError(TfComponentsError):
    """An error the user can fix: bad arguments, wrong directory, etc."""
    exit_code = 1


class InternalError(TfComponentsError):
    """An unexpected failure, reported together with its underlying cause."""
    exit_code = 2

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message} - {self.cause}"


class TooManyFilesError(UserError):
    """Raised when component discovery visits more entries than allowed."""

    def __init__(self, max_files: int):
        super().__init__(
            f"We found more than {max_files} files in the subdirectories, "
            "maybe you should try to run the command on a subdirectory with less files"
        )
        self.max_files = max_files


class ComponentNotFoundError(UserError):
    """Raised when a component path does not exist."""

    def __init__(self, component: str):
        super().__init__(f"Component '{component}' not found")
        self.component = component


class NotADirectoryComponentError(UserError):
    """Raised when a component path exists but is not a directory."""

    def __init__(self, component: str):
        super().__init__(f"Component '{component}' is not a folder")
        self.component = component


class TerraformNotFoundError(UserError):
    """Raised when the terraform executable cannot be found on PATH."""

    def __init__(self, binary: str):
        super().__init__(
            f"Could not find '{binary}' on your PATH, is Terraform installed?"
        )
        self.binary = binary


class DiscoveryError(InternalError):
    """Filesystem failure while walking the component tree."""


class StateFileError(InternalError):
    """A terraform.tfstate exists but could not be read or understood."""


class TerraformExecutionError(InternalError):
    """The terraform process could not be started."""
