"""JSON Patch engine exceptions."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover
    from json_patch_engine.models import Operation


class JsonPatchError(Exception):
    """Base class for every error raised by the engine."""

    pass


class MalformedPointerError(JsonPatchError):
    """Raised when a JSON Pointer is neither empty nor starts with '/'."""

    pass


class InvalidOperationError(JsonPatchError):
    """Raised when an operation is statically invalid, independent of the document."""

    pass


class UnknownOperationError(InvalidOperationError):
    """Raised when no extension is registered for the operation name."""

    pass


class MissingFieldError(InvalidOperationError):
    """Raised when an operation lacks a member its extension requires."""

    pass


class BadIndexSyntaxError(JsonPatchError):
    """Raised when an array index token does not match the active index grammar."""

    pass


class IndexOutOfRangeError(JsonPatchError):
    """Raised when a resolved array index falls outside [0, size]."""

    pass


class TypeMismatchError(JsonPatchError):
    """Raised when a container operation hits a scalar, or the document root is not a container."""

    pass


class PathNotFoundError(JsonPatchError):
    """
    Raised when the addressed location does not exist.

    This is the only recoverable failure: when strict path checking is disabled,
    operations failing with it are skipped.
    """

    pass


class StopPatch(JsonPatchError):
    """
    Abort signal. Extensions raise it to halt the remaining operations on purpose,
    e.g. a failing "test" operation.
    """

    def __init__(self, message: str = "stop"):
        super().__init__(message)


class OperationError(JsonPatchError):
    """
    Raised by the patcher when an operation fails during apply.

    Attributes:
        operation: The operation that failed.
        description: Human readable description of the operation.
        extension: The extension that handled the operation.
        cause: The underlying error raised by the extension.
    """

    prefix = "operation failed"

    def __init__(self, operation: "Operation", description: str, extension: Any, cause: Exception):
        self.operation = operation
        self.description = description
        self.extension = extension
        self.cause: Exception = cause
        super().__init__(f"{self.prefix}: {description} ext={type(extension).__name__}, err={cause}")


class OperationStoppedError(OperationError):
    """The operation raised the abort signal; the patch was halted intentionally."""

    prefix = "operation stopped"


class OperationFailedError(OperationError):
    """The operation failed; the patch or the document is broken."""

    prefix = "operation failed"
