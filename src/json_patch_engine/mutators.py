"""
Per-container edit primitives shared by the builtin operations.

Objects are edited by key. Arrays are edited by index token, resolved with
`parse_array_index`; lists are mutated in place so parents need no rewrite.
"""

from typing import Any

from json_patch_engine.config import PatchConfig
from json_patch_engine.errors import JsonPatchError, PathNotFoundError, TypeMismatchError
from json_patch_engine.navigator import parse_array_index


def add_value(config: PatchConfig, container: Any, key: str, value: Any) -> None:
    """
    Insert `value` under `key`.

    Objects get the key set or overwritten. Arrays get the value inserted at the
    index, shifting later elements right; the append position appends.
    """
    if isinstance(container, dict):
        container[key] = value
    elif isinstance(container, list):
        index = parse_array_index(config, len(container), key)
        container.insert(index, value)
    else:
        raise TypeMismatchError(f"bad type for add: {type(container).__name__}")


def replace_value(config: PatchConfig, container: Any, key: str, value: Any) -> None:
    """
    Overwrite the value under `key`.

    A missing object key, or the array append position, is an error in strict
    mode. Otherwise a missing key is inserted and the append position is ignored.
    """
    if isinstance(container, dict):
        if config.strict_path_exists and key not in container:
            raise PathNotFoundError(f"path member not exists: {key}")
        container[key] = value
    elif isinstance(container, list):
        index = parse_array_index(config, len(container), key)
        if index == len(container):
            if config.strict_path_exists:
                raise PathNotFoundError(f"path member not exists: {key}")
            return
        container[index] = value
    else:
        raise TypeMismatchError(f"bad type for replace: {type(container).__name__}")


def _resolve_existing_index(config: PatchConfig, container: list, key: str) -> int:
    # Any failure to address an existing element counts as a missing path here.
    try:
        index = parse_array_index(config, len(container), key)
    except JsonPatchError as e:
        raise PathNotFoundError(f"path member not exists: {key}") from e
    if index == len(container):
        raise PathNotFoundError(f"path member not exists: {key}")
    return index


def remove_value(config: PatchConfig, container: Any, key: str) -> None:
    """
    Remove the value under `key`.

    In non-strict mode removing something that does not exist is a no-op.
    """
    if isinstance(container, dict):
        if key not in container:
            if config.strict_path_exists:
                raise PathNotFoundError(f"path member not exists: {key}")
            return
        del container[key]
    elif isinstance(container, list):
        try:
            index = _resolve_existing_index(config, container, key)
        except PathNotFoundError:
            if config.strict_path_exists:
                raise
            return
        del container[index]
    else:
        raise TypeMismatchError(f"bad type for remove: {type(container).__name__}")


def move_value(config: PatchConfig, container: Any, from_key: str, to_key: str) -> None:
    """
    Reposition a value inside one container.

    Objects rename `from_key` to `to_key`. For arrays both indices are resolved
    against the length before the removal; the element is then popped at
    `from_key` and inserted at `to_key`.
    """
    if isinstance(container, dict):
        if from_key not in container:
            if config.strict_path_exists:
                raise PathNotFoundError(f"path member not exists: {from_key}")
            return
        container[to_key] = container.pop(from_key)
    elif isinstance(container, list):
        try:
            from_index = _resolve_existing_index(config, container, from_key)
            to_index = parse_array_index(config, len(container), to_key)
        except JsonPatchError as e:
            if not config.strict_path_exists:
                return
            raise PathNotFoundError(f"cannot move array element {from_key} to {to_key}: {e}") from e
        if from_index == to_index:
            return
        element = container.pop(from_index)
        container.insert(to_index, element)
    else:
        raise TypeMismatchError(f"bad type for move: {type(container).__name__}")
