"""Dict merge with dotted-path resolution."""

import random
from collections.abc import Mapping, MutableMapping
from typing import Any


def copy(
    target: MutableMapping[str, Any] | str,
    source: Mapping[str, Any],
    overwrite: bool = False,
    *,
    root: MutableMapping[str, Any] | None = None,
) -> MutableMapping[str, Any]:
    """Copy keys from one mapping into another.

    If ``target`` is a string it is a dot separated path resolved under
    ``root``; any missing segment is created as an empty dict.

    Args:
        target: The mapping to copy into, or a dotted path under root.
        source: The mapping to copy from.
        overwrite: Replace keys that already exist on the target.
        root: Mapping a string target is resolved against.

    Returns:
        The *same* target mapping back.

    Raises:
        ValueError: If target is a path and no root was given.
    """
    if isinstance(target, str):
        if root is None:
            raise ValueError(f"cannot resolve path {target!r} without a root")
        target = resolve(root, target)

    for key, value in source.items():
        if overwrite or key not in target:
            target[key] = value
    return target


def resolve(root: MutableMapping[str, Any], path: str) -> MutableMapping[str, Any]:
    """Walk a dotted path under root, creating empty dicts as needed."""
    node = root
    for part in path.split("."):
        if part == "":
            continue
        if part not in node:
            node[part] = {}
        child = node[part]
        if not isinstance(child, MutableMapping):
            raise ValueError(f"path segment {part!r} of {path!r} is not a mapping")
        node = child
    return node


def generate_guid() -> str:
    """Generate a weak random id, e.g. ``f2b1c9e04d7a1``."""
    return f"f{random.getrandbits(48):x}"
