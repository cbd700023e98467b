from .config import PatchConfig
from .errors import (
    BadIndexSyntaxError,
    IndexOutOfRangeError,
    InvalidOperationError,
    JsonPatchError,
    MalformedPointerError,
    MissingFieldError,
    OperationError,
    OperationFailedError,
    OperationStoppedError,
    PathNotFoundError,
    StopPatch,
    TypeMismatchError,
    UnknownOperationError,
)
from .extensions import Descriptor, ExtensionRegistry, PatchExtension
from .models import OpName, Operation, parse_operations
from .navigator import ArraySlot, DocumentRef, ObjectSlot, RootSlot
from .patcher import JsonPatcher, apply_patch
from .pointer import JsonPointer, escape_token, unescape_token

__all__ = [
    "PatchConfig",
    "JsonPatcher",
    "apply_patch",
    "JsonPointer",
    "escape_token",
    "unescape_token",
    "OpName",
    "Operation",
    "parse_operations",
    "DocumentRef",
    "RootSlot",
    "ObjectSlot",
    "ArraySlot",
    "PatchExtension",
    "Descriptor",
    "ExtensionRegistry",
    "JsonPatchError",
    "MalformedPointerError",
    "InvalidOperationError",
    "UnknownOperationError",
    "MissingFieldError",
    "BadIndexSyntaxError",
    "IndexOutOfRangeError",
    "TypeMismatchError",
    "PathNotFoundError",
    "StopPatch",
    "OperationError",
    "OperationStoppedError",
    "OperationFailedError",
]
