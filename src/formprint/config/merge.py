# topmark:header:start
#
#   project      : FormPrint
#   file         : merge.py
#   file_relpath : src/formprint/config/merge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive structural merge of option maps.

Options are a tree of nested ``dict`` sections, lists and scalars. Merging is
key-by-key: nested maps merge recursively, while lists and scalars from a
later layer replace the earlier value wholesale. Inputs are never mutated.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping
from typing import Any

OptionMap = dict[str, Any]


def merge_deep(*layers: Mapping[str, Any] | None) -> OptionMap:
    """Merge option layers left to right; later layers win.

    Args:
        *layers (Mapping[str, Any] | None): Option maps in increasing precedence.
            ``None`` layers are skipped.

    Returns:
        OptionMap: A new nested dict; no input layer is shared or mutated.
    """
    result: OptionMap = {}
    for layer in layers:
        if not layer:
            continue
        _merge_into(result, layer)
    return result


def _merge_into(target: OptionMap, layer: Mapping[str, Any]) -> None:
    for key, value in layer.items():
        current = target.get(key)
        if isinstance(value, Mapping) and isinstance(current, dict):
            _merge_into(current, value)
        elif isinstance(value, Mapping):
            target[key] = merge_deep(value)
        else:
            target[key] = copy.deepcopy(value)


def iter_leaves(options: Mapping[str, Any], prefix: str = "") -> Iterator[tuple[str, Any]]:
    """Yield ``(dotted_key, value)`` for every non-map value in ``options``."""
    for key, value in options.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            yield from iter_leaves(value, path)
        else:
            yield path, value


def get_path(options: Mapping[str, Any], dotted_key: str, default: Any = None) -> Any:
    """Return the value stored under ``dotted_key`` (e.g. ``"map.justify"``)."""
    node: Any = options
    for part in dotted_key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return default
        node = node[part]
    return node


def set_path(options: OptionMap, dotted_key: str, value: Any) -> None:
    """Store ``value`` under ``dotted_key``, creating intermediate sections."""
    parts = dotted_key.split(".")
    node = options
    for part in parts[:-1]:
        node = node.setdefault(part, {})
    node[parts[-1]] = value
