"""
Component status from the local Terraform state.

Only the ``resources`` array of ``terraform.tfstate`` is looked at:
a component with at least one resource is applied, a component with no
state file or an empty resource list is destroyed. The file is never
written.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..errors import StateFileError

logger = logging.getLogger(__name__)

STATE_FILENAME = "terraform.tfstate"


class ComponentStatus(str, Enum):
    """Status of a component as shown by ``tf status``."""
    APPLIED = "applied"
    DESTROYED = "destroyed"

    def __str__(self) -> str:
        return self.value


@dataclass
class StateSummary:
    """The part of a terraform.tfstate that tfcomponents cares about."""
    resource_types: List[str] = field(default_factory=list)

    @property
    def resource_count(self) -> int:
        return len(self.resource_types)


def state_file_path(component_path: str) -> str:
    return os.path.join(component_path, STATE_FILENAME)


def _parse_state(body: str, state_file: str) -> StateSummary:
    """Parse a state document, checking the shape of ``resources``."""
    try:
        document = json.loads(body)
    except json.JSONDecodeError as e:
        raise StateFileError(f"Could not parse '{state_file}'", e) from e

    if not isinstance(document, dict):
        raise StateFileError(f"Could not parse '{state_file}'", ValueError("expected a JSON object"))

    resources = document.get("resources")
    if resources is None:
        return StateSummary()

    if not isinstance(resources, list):
        raise StateFileError(f"Could not parse '{state_file}'", ValueError("'resources' is not a list"))

    types = []
    for index, resource in enumerate(resources):
        if not isinstance(resource, dict):
            raise StateFileError(
                f"Could not parse '{state_file}'",
                ValueError(f"resource {index} is not an object"),
            )
        res_type = resource.get("type", "")
        if not isinstance(res_type, str):
            raise StateFileError(
                f"Could not parse '{state_file}'",
                ValueError(f"resource {index} has a non-string type"),
            )
        types.append(res_type)

    return StateSummary(resource_types=types)


def read_state(component_path: str) -> Optional[StateSummary]:
    """
    Read the local state of a component.

    Returns:
        The state summary, or None when there is no state file

    Raises:
        StateFileError: The state file exists but is unreadable or malformed
    """
    state_file = state_file_path(component_path)

    try:
        with open(state_file, "r", encoding="utf-8") as f:
            body = f.read()
    except FileNotFoundError:
        logger.debug(f"No state file at {state_file}")
        return None
    except (OSError, UnicodeDecodeError) as e:
        raise StateFileError(f"Could not read the terraform.tfstate of component '{component_path}'", e) from e

    return _parse_state(body, state_file)


def get_status(component_path: str) -> ComponentStatus:
    """Classify a component as applied or destroyed."""
    summary = read_state(component_path)
    if summary is None or summary.resource_count == 0:
        return ComponentStatus.DESTROYED
    return ComponentStatus.APPLIED
