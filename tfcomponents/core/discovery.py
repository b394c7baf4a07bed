"""
Component discovery.

A component is any directory that directly contains a ``main.tf``.
Discovery walks a directory tree depth-first and stops with
TooManyFilesError once it has visited more than ``max_files`` entries,
which usually means it was pointed at the wrong directory (for example
the filesystem root).
"""

import logging
import os
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from ..errors import DiscoveryError, TooManyFilesError

logger = logging.getLogger(__name__)

MARKER_FILENAME = "main.tf"
DEFAULT_MAX_FILES = 1000


@dataclass
class Component:
    """A directory containing a main.tf."""
    name: str   # relative to the scan root, "/"-separated, e.g. "network/vpc"
    path: str   # directory on disk


def _walk(root: str) -> Iterator[Tuple[str, bool]]:
    """
    Yield (path, is_dir) for root and everything below it.

    Depth-first, entries of each directory in lexical order, symlinks
    are never followed. A directory is only listed after it has been
    yielded, so a consumer that stops early never pays for the listing.
    """
    stack: List[Tuple[str, bool]] = [(root, True)]
    while stack:
        path, is_dir = stack.pop()
        yield path, is_dir

        if not is_dir:
            continue

        with os.scandir(path) as it:
            entries = sorted(it, key=lambda entry: entry.name)

        # Reversed so the smallest name is popped first
        for entry in reversed(entries):
            stack.append((entry.path, entry.is_dir(follow_symlinks=False)))


def component_name(root: str, directory: str) -> str:
    """
    Name of the component in ``directory`` relative to ``root``.

    Separators are normalized to "/". The root directory itself is ".".
    """
    relative = os.path.relpath(directory, root)
    return relative.replace(os.sep, "/").strip("/") or "."


def find_components(root: str, max_files: int = DEFAULT_MAX_FILES) -> List[Component]:
    """
    Find every component below ``root``.

    Args:
        root: Directory to scan
        max_files: Maximum number of filesystem entries to visit

    Returns:
        Components in walk order

    Raises:
        TooManyFilesError: More than ``max_files`` entries were visited
        DiscoveryError: The filesystem could not be read
    """
    components: List[Component] = []
    visited = 0

    try:
        for path, is_dir in _walk(root):
            visited += 1
            if visited > max_files:
                logger.debug(f"Stopped scanning {root} after {max_files} entries")
                raise TooManyFilesError(max_files)

            if is_dir or os.path.basename(path) != MARKER_FILENAME:
                continue

            directory = os.path.dirname(path)
            component = Component(name=component_name(root, directory), path=directory)
            logger.debug(f"Found component {component.name} at {component.path}")
            components.append(component)

    except OSError as e:
        raise DiscoveryError(f"Could not scan the components in '{root}'", e) from e

    logger.info(f"Found {len(components)} components in {root} ({visited} entries)")
    return components
