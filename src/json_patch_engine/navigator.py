"""
Navigation through a JSON document.

Walking a path yields the located node together with a slot: a handle that can
overwrite exactly that position in its parent container, or the document root.
"""

from dataclasses import dataclass
import re
from typing import Any, Dict, List, Sequence, Tuple, Union

from json_patch_engine.config import PatchConfig
from json_patch_engine.errors import (
    BadIndexSyntaxError,
    IndexOutOfRangeError,
    PathNotFoundError,
    TypeMismatchError,
)

_INDEX_RE = re.compile(r"0|[1-9][0-9]*")
_NEGATIVE_INDEX_RE = re.compile(r"-?(0|[1-9][0-9]*)")

APPEND_TOKEN = "-"


@dataclass
class DocumentRef:
    """Holds the document root so whole-document operations can rebind it."""

    root: Any


@dataclass
class RootSlot:
    ref: DocumentRef

    def get(self) -> Any:
        return self.ref.root

    def set(self, value: Any) -> None:
        self.ref.root = value


@dataclass
class ObjectSlot:
    container: Dict[str, Any]
    key: str

    def get(self) -> Any:
        return self.container[self.key]

    def set(self, value: Any) -> None:
        self.container[self.key] = value


@dataclass
class ArraySlot:
    container: List[Any]
    index: int

    def get(self) -> Any:
        return self.container[self.index]

    def set(self, value: Any) -> None:
        self.container[self.index] = value


Slot = Union[RootSlot, ObjectSlot, ArraySlot]


def parse_array_index(config: PatchConfig, size: int, token: str) -> int:
    """
    Resolve an array index token against an array of the given size.

    Args:
        config: Decides whether negative indices are accepted.
        size: Current length of the array.
        token: The raw reference token.

    Returns:
        An index in [0, size]. `size` itself denotes the append position.

    Raises:
        BadIndexSyntaxError: If the token does not match the index grammar.
        IndexOutOfRangeError: If the resolved index falls outside [0, size].
    """
    if token == APPEND_TOKEN:
        return size

    pattern = _NEGATIVE_INDEX_RE if config.support_negative_array_index else _INDEX_RE
    if not pattern.fullmatch(token):
        raise BadIndexSyntaxError(f"bad array index: {token}")

    index = int(token)
    if index < 0:
        index += size
    if index < 0 or index > size:
        raise IndexOutOfRangeError(f"array index out of range: size={size}, {token}")
    return index


def visit_segment(config: PatchConfig, node: Any, segment: str) -> Tuple[Any, Slot]:
    """
    Descend one level from `node`.

    Raises:
        PathNotFoundError: If the key or element does not exist.
        TypeMismatchError: If `node` is a scalar.
    """
    if isinstance(node, dict):
        if segment not in node:
            raise PathNotFoundError(f"path member not exists: {segment}")
        return node[segment], ObjectSlot(node, segment)

    if isinstance(node, list):
        if not node:
            raise PathNotFoundError(f"path member not exists: {segment}")
        index = parse_array_index(config, len(node), segment)
        if index == len(node):
            raise PathNotFoundError(f"path member not exists: {segment}")
        return node[index], ArraySlot(node, index)

    raise TypeMismatchError(f"cannot visit type: {type(node).__name__}")


def visit_path(config: PatchConfig, ref: DocumentRef, segments: Sequence[str]) -> Tuple[Any, Slot]:
    """
    Walk `segments` from the document root.

    An empty segment list visits the root itself, with a slot rebinding the root.

    Returns:
        The located node and the slot holding it.
    """
    node: Any = ref.root
    slot: Slot = RootSlot(ref)
    for segment in segments:
        node, slot = visit_segment(config, node, segment)
    return node, slot
