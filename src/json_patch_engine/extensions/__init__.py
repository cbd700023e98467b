from .base import Descriptor, ExtensionRegistry, PatchExtension, describe_operation
from .builtin import (
    AddExtension,
    CopyExtension,
    MoveExtension,
    RemoveExtension,
    ReplaceExtension,
    TestExtension,
    builtin_extensions,
)

__all__ = [
    "PatchExtension",
    "Descriptor",
    "ExtensionRegistry",
    "describe_operation",
    "AddExtension",
    "RemoveExtension",
    "ReplaceExtension",
    "MoveExtension",
    "CopyExtension",
    "TestExtension",
    "builtin_extensions",
]
