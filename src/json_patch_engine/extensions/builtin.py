"""
The six operations of JSON Patch (https://datatracker.ietf.org/doc/html/rfc6902#section-4).
"""

from typing import TYPE_CHECKING, Any, List

from json_patch_engine.errors import InvalidOperationError, JsonPatchError, PathNotFoundError, StopPatch
from json_patch_engine.extensions.base import PatchExtension
from json_patch_engine.models import OpName, Operation
from json_patch_engine.navigator import DocumentRef
from json_patch_engine.utils.json_utils import JsonUtils

if TYPE_CHECKING:  # pragma: no cover
    from json_patch_engine.patcher import JsonPatcher


def _replace_root(patcher: "JsonPatcher", ref: DocumentRef, value: Any) -> None:
    _, slot = patcher.visit_path(ref, [])
    slot.set(value)


class AddExtension(PatchExtension):
    op_name = OpName.ADD

    def check(self, patcher: "JsonPatcher", op: Operation) -> None:
        self._require_value(op)

    def apply(self, patcher: "JsonPatcher", ref: DocumentRef, op: Operation) -> None:
        pointer = op.pointer
        value = JsonUtils.deep_copy(op.value)
        if pointer.is_whole_document():
            _replace_root(patcher, ref, value)
            return
        parent, _ = self._visit(patcher, ref, pointer.parent_segments(), op.path)
        patcher.add_value(parent, pointer.last_segment(), value)


class RemoveExtension(PatchExtension):
    op_name = OpName.REMOVE

    def check(self, patcher: "JsonPatcher", op: Operation) -> None:
        pass

    def apply(self, patcher: "JsonPatcher", ref: DocumentRef, op: Operation) -> None:
        pointer = op.pointer
        parent, _ = self._visit(patcher, ref, pointer.parent_segments(), op.path)
        patcher.remove_value(parent, pointer.last_segment())


class ReplaceExtension(PatchExtension):
    op_name = OpName.REPLACE

    def check(self, patcher: "JsonPatcher", op: Operation) -> None:
        self._require_value(op)

    def apply(self, patcher: "JsonPatcher", ref: DocumentRef, op: Operation) -> None:
        pointer = op.pointer
        value = JsonUtils.deep_copy(op.value)
        if pointer.is_whole_document():
            _replace_root(patcher, ref, value)
            return
        parent, _ = self._visit(patcher, ref, pointer.parent_segments(), op.path)
        patcher.replace_value(parent, pointer.last_segment(), value)


class MoveExtension(PatchExtension):
    op_name = OpName.MOVE

    def check(self, patcher: "JsonPatcher", op: Operation) -> None:
        self._require_from(op)
        if op.from_pointer.is_prefix_of(op.pointer):
            raise InvalidOperationError(f"cannot move {op.from_} into one of its children: {op}")

    def apply(self, patcher: "JsonPatcher", ref: DocumentRef, op: Operation) -> None:
        pointer, from_pointer = op.pointer, op.from_pointer
        from_parent, _ = self._visit(patcher, ref, from_pointer.parent_segments(), op.from_)
        try:
            value, _ = patcher.visit_segment(from_parent, from_pointer.last_segment())
        except JsonPatchError as e:
            if not patcher.config.strict_path_exists:
                return
            if isinstance(e, PathNotFoundError):
                raise PathNotFoundError(f"path not exists: {op.from_}, err={e}") from e
            raise

        if pointer.is_whole_document():
            patcher.remove_value(from_parent, from_pointer.last_segment())
            _replace_root(patcher, ref, value)
            return

        if pointer.same_parent_as(from_pointer):
            patcher.move_value(from_parent, from_pointer.last_segment(), pointer.last_segment())
            return

        patcher.remove_value(from_parent, from_pointer.last_segment())
        parent, _ = self._visit(patcher, ref, pointer.parent_segments(), op.path)
        patcher.add_value(parent, pointer.last_segment(), value)

    def describe(self, patcher: "JsonPatcher", op: Operation) -> str:
        return f"move {op.from_} to {op.path}"


class CopyExtension(PatchExtension):
    op_name = OpName.COPY

    def check(self, patcher: "JsonPatcher", op: Operation) -> None:
        self._require_from(op)

    def apply(self, patcher: "JsonPatcher", ref: DocumentRef, op: Operation) -> None:
        pointer, from_pointer = op.pointer, op.from_pointer
        parent, _ = self._visit(patcher, ref, pointer.parent_segments(), op.path)
        value, _ = self._visit(patcher, ref, from_pointer.segments, op.from_)
        value = JsonUtils.deep_copy(value)
        if pointer.is_whole_document():
            _replace_root(patcher, ref, value)
            return
        patcher.add_value(parent, pointer.last_segment(), value)

    def describe(self, patcher: "JsonPatcher", op: Operation) -> str:
        return f"copy {op.path} from {op.from_}"


class TestExtension(PatchExtension):
    """
    Compares the value at `path` with the operation value. A mismatch halts the
    patch with `StopPatch` rather than failing it.
    """

    __test__ = False  # not a pytest test class

    op_name = OpName.TEST

    def check(self, patcher: "JsonPatcher", op: Operation) -> None:
        self._require_value(op)

    def apply(self, patcher: "JsonPatcher", ref: DocumentRef, op: Operation) -> None:
        try:
            value, _ = self._visit(patcher, ref, op.pointer.segments, op.path)
        except JsonPatchError as e:
            if patcher.config.strict_path_exists:
                raise
            raise StopPatch(f"test path not exists: {op.path}") from e

        if not JsonUtils.equal(value, op.value):
            raise StopPatch(f"test failed: value at {op.path} differs")


def builtin_extensions() -> List[PatchExtension]:
    return [
        AddExtension(),
        RemoveExtension(),
        ReplaceExtension(),
        MoveExtension(),
        CopyExtension(),
        TestExtension(),
    ]
