from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple, runtime_checkable

from json_patch_engine.errors import InvalidOperationError, MissingFieldError, PathNotFoundError
from json_patch_engine.models import Operation
from json_patch_engine.navigator import DocumentRef, Slot

if TYPE_CHECKING:  # pragma: no cover
    from json_patch_engine.patcher import JsonPatcher


class PatchExtension(ABC):
    """
    Handler for one operation name.

    The patcher calls `check` for every operation of a patch before any of them
    is applied, then `apply` for each operation in order.
    """

    op_name: str

    @abstractmethod
    def check(self, patcher: "JsonPatcher", op: Operation) -> None:
        """
        Validate the operation without looking at the document.

        Raises:
            InvalidOperationError: If the operation can never be applied.
        """
        pass

    @abstractmethod
    def apply(self, patcher: "JsonPatcher", ref: DocumentRef, op: Operation) -> None:
        """
        Apply the checked operation to the document.

        Raises:
            PathNotFoundError: If the addressed location does not exist.
            StopPatch: To halt the remaining operations on purpose.
            JsonPatchError: For any other failure.
        """
        pass

    def _require_value(self, op: Operation) -> None:
        if not op.has_value:
            raise MissingFieldError(f"operation {self.op_name} must contain a value member: {op}")

    def _require_from(self, op: Operation) -> None:
        if op.from_ is None:
            raise MissingFieldError(f"operation {self.op_name} must contain a from member: {op}")

    @staticmethod
    def _visit(patcher: "JsonPatcher", ref: DocumentRef, segments: Sequence[str], pointer: str) -> Tuple[Any, Slot]:
        try:
            return patcher.visit_path(ref, segments)
        except PathNotFoundError as e:
            raise PathNotFoundError(f"path not exists: {pointer}, err={e}") from e


@runtime_checkable
class Descriptor(Protocol):
    """Optional capability: describe an operation instance for error messages."""

    def describe(self, patcher: "JsonPatcher", op: Operation) -> str: ...


def describe_operation(patcher: "JsonPatcher", extension: PatchExtension, op: Operation) -> str:
    if isinstance(extension, Descriptor):
        return extension.describe(patcher, op)
    return f"{op.op} {op.path}"


class ExtensionRegistry:
    """
    Maps operation names to their extensions. Registering a name twice replaces
    the earlier extension, which is how builtin operations are overridden.
    """

    def __init__(self, extensions: Iterable[PatchExtension] = ()):
        self._extensions: Dict[str, PatchExtension] = {}
        for extension in extensions:
            self.register(extension)

    def register(self, extension: PatchExtension) -> None:
        if not getattr(extension, "op_name", None):
            raise InvalidOperationError(f"Extension {type(extension).__name__} does not declare an op_name")
        self._extensions[extension.op_name] = extension

    def get(self, name: str) -> Optional[PatchExtension]:
        return self._extensions.get(name)

    def names(self) -> List[str]:
        return list(self._extensions)

    def copy(self) -> "ExtensionRegistry":
        return ExtensionRegistry(self._extensions.values())

    def __contains__(self, name: object) -> bool:
        return name in self._extensions

    def __len__(self) -> int:
        return len(self._extensions)
