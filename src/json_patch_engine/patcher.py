import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from json_patch_engine.config import PatchConfig
from json_patch_engine.errors import (
    MissingFieldError,
    OperationFailedError,
    OperationStoppedError,
    PathNotFoundError,
    StopPatch,
    TypeMismatchError,
    UnknownOperationError,
)
from json_patch_engine.extensions import (
    ExtensionRegistry,
    PatchExtension,
    builtin_extensions,
    describe_operation,
)
from json_patch_engine.models import Operation, OperationLike, parse_operations
from json_patch_engine.mutators import add_value, move_value, remove_value, replace_value
from json_patch_engine.navigator import DocumentRef, Slot, parse_array_index, visit_path, visit_segment
from json_patch_engine.pointer import JsonPointer
from json_patch_engine.utils.json_utils import JsonUtils

logger = logging.getLogger(__name__)

Operations = Union[bytes, str, Iterable[OperationLike]]


class JsonPatcher:
    """
    Applies JSON Patch operations to documents.

    With default options it follows RFC 6902 exactly. A patcher holds no per-document
    state, so one instance can serve many documents; a single document must not be
    patched by two calls at the same time.

    Example:
        >>> patcher = JsonPatcher(strict_path_exists=False)
        >>> patcher.apply_in_place({"a": 1}, [{"op": "remove", "path": "/b"}])
        {'a': 1}
    """

    def __init__(
        self,
        config: Optional[PatchConfig] = None,
        extensions: Iterable[PatchExtension] = (),
        **options: Any,
    ):
        """
        Args:
            config: The configuration. Built from `options` when not given.
            extensions: Extra extensions, registered after the builtin ones; an
                extension with a builtin name overrides it.
            **options: `PatchConfig` fields, e.g. `strict_path_exists=False`.
        """
        if config is not None and options:
            raise ValueError("Pass either a config or config options, not both")
        self._config = config if config is not None else PatchConfig(**options)
        self._registry = ExtensionRegistry(builtin_extensions())
        for extension in extensions:
            self._registry.register(extension)

    @property
    def config(self) -> PatchConfig:
        return self._config

    @property
    def registry(self) -> ExtensionRegistry:
        return self._registry

    def with_extension(self, extension: PatchExtension) -> "JsonPatcher":
        """Return a new patcher with the same configuration and one more extension."""
        patcher = JsonPatcher(self._config)
        patcher._registry = self._registry.copy()
        patcher._registry.register(extension)
        return patcher

    # Navigation and mutation primitives, bound to this patcher's configuration.
    # Extensions use these to implement their operations.

    def parse_array_index(self, size: int, token: str) -> int:
        return parse_array_index(self._config, size, token)

    def visit_segment(self, node: Any, segment: str) -> Tuple[Any, Slot]:
        return visit_segment(self._config, node, segment)

    def visit_path(self, ref: DocumentRef, segments: Sequence[str]) -> Tuple[Any, Slot]:
        return visit_path(self._config, ref, segments)

    def add_value(self, container: Any, key: str, value: Any) -> None:
        add_value(self._config, container, key, value)

    def replace_value(self, container: Any, key: str, value: Any) -> None:
        replace_value(self._config, container, key, value)

    def remove_value(self, container: Any, key: str) -> None:
        remove_value(self._config, container, key)

    def move_value(self, container: Any, from_key: str, to_key: str) -> None:
        move_value(self._config, container, from_key, to_key)

    def _extension_for(self, op: Operation) -> PatchExtension:
        extension = self._registry.get(op.op) if op.op is not None else None
        if extension is None:
            raise UnknownOperationError(f"unknown operation: {op.op}")
        return extension

    def check(self, ops: Operations) -> List[Operation]:
        """
        Validate every operation without touching any document.

        Returns:
            The parsed operations.

        Raises:
            MissingFieldError: If an operation lacks a required member.
            MalformedPointerError: If `path` or `from` is not a valid JSON Pointer.
            UnknownOperationError: If no extension handles the operation name.
            InvalidOperationError: If an extension rejects the operation.
        """
        operations = parse_operations(ops)
        for op in operations:
            if op.op is None:
                raise MissingFieldError(f"must contain an op member: {op}")
            if op.path is None:
                raise MissingFieldError(f"must contain a path member: {op}")
            JsonPointer(op.path).check()
            if op.from_ is not None:
                JsonPointer(op.from_).check()
            self._extension_for(op).check(self, op)
        return operations

    def apply_document(self, ref: DocumentRef, ops: Operations) -> None:
        """
        Check all operations, then apply them in order to the document held by `ref`.

        Raises:
            InvalidOperationError: If the check fails; the document is untouched.
            OperationStoppedError: If an operation raised the abort signal.
            OperationFailedError: If an operation failed.
        """
        operations = self.check(ops)
        for op in operations:
            extension = self._extension_for(op)
            try:
                extension.apply(self, ref, op)
            except PathNotFoundError as e:
                if self._config.strict_path_exists:
                    raise self._operation_error(OperationFailedError, extension, op, e) from e
                logger.debug(f"Skipping {op.op} {op.path}: {e}")
            except StopPatch as e:
                raise self._operation_error(OperationStoppedError, extension, op, e) from e
            except Exception as e:
                raise self._operation_error(OperationFailedError, extension, op, e) from e
            else:
                logger.debug(f"Applied {op.op} {op.path}")

    def _operation_error(self, error_class, extension: PatchExtension, op: Operation, cause: Exception):
        return error_class(op, describe_operation(self, extension, op), extension, cause)

    def apply_in_place(self, document: Any, ops: Operations) -> Any:
        """
        Apply operations to a decoded document.

        Containers are modified in place. An operation on the whole document
        rebinds the root, so always use the returned value.

        Args:
            document: The root, which must be an object or an array.
            ops: The operations, or a serialized patch document.

        Returns:
            The patched root.

        Raises:
            TypeMismatchError: If the root is not an object or an array.
        """
        if not isinstance(document, (dict, list)):
            raise TypeMismatchError(f"bad type for apply: {type(document).__name__}")
        ref = DocumentRef(document)
        self.apply_document(ref, ops)
        return ref.root

    def apply(self, document: Union[bytes, str], ops: Operations) -> bytes:
        """
        Apply operations to a serialized document and return it serialized again,
        formatted according to the configuration.

        Raises:
            json.JSONDecodeError: If the document is not valid JSON.
        """
        ref = DocumentRef(JsonUtils.decode(document))
        self.apply_document(ref, ops)
        return JsonUtils.encode(
            ref.root,
            prefix=self._config.json_prefix,
            indent=self._config.json_indent,
            escape_html=self._config.json_escape_html,
            sort_keys=self._config.sort_keys,
        )


def apply_patch(document: Any, ops: Operations, **options: Any) -> Any:
    """
    Apply a patch with a one-off patcher. Serialized documents (bytes or str)
    come back serialized, decoded documents are patched in place.
    """
    patcher = JsonPatcher(**options)
    if isinstance(document, (bytes, str)):
        return patcher.apply(document, ops)
    return patcher.apply_in_place(document, ops)
