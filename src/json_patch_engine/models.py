from collections.abc import Iterable
from enum import StrEnum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, JsonValue, ValidationError, field_validator

from json_patch_engine.errors import InvalidOperationError
from json_patch_engine.pointer import JsonPointer
from json_patch_engine.utils.json_utils import JsonUtils


class OpName(StrEnum):
    """
    The operations defined by JSON Patch (https://datatracker.ietf.org/doc/html/rfc6902).
    Extensions may register further names.
    """

    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


class Operation(BaseModel):
    """
    A single JSON Patch operation.

    Whether `value` was given is tracked separately from its content: an explicit
    `"value": null` is a present value that happens to be null. Use `has_value`.
    Members of the wrong JSON type on the wire are treated as absent.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    op: Optional[str] = Field(default=None, description="The operation name, e.g. 'add'.")
    path: Optional[str] = Field(default=None, description="JSON Pointer to the target location.")
    value: JsonValue = Field(default=None, description="The operation value, for add, replace and test.")
    from_: Optional[str] = Field(
        default=None,
        alias="from",
        description="JSON Pointer to the source location, for move and copy.",
    )

    @field_validator("op", "path", "from_", mode="before")
    @classmethod
    def _drop_non_string(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @property
    def has_value(self) -> bool:
        return "value" in self.model_fields_set

    @property
    def pointer(self) -> JsonPointer:
        return JsonPointer(self.path or "")

    @property
    def from_pointer(self) -> JsonPointer:
        return JsonPointer(self.from_ or "")

    def to_wire(self) -> Dict[str, Any]:
        """
        Serialize back to the RFC 6902 wire shape. Absent `value` and `from`
        members are omitted; an explicit null value is kept.
        """
        wire: Dict[str, Any] = {"op": self.op, "path": self.path}
        if self.has_value:
            wire["value"] = JsonUtils.deep_copy(self.value)
        if self.from_ is not None:
            wire["from"] = self.from_
        return wire

    def __str__(self) -> str:
        return str(self.to_wire())


OperationLike = Union[Operation, Dict[str, Any]]


def parse_operations(data: Union[bytes, str, Iterable[OperationLike]]) -> List[Operation]:
    """
    Build operations from a serialized patch document or from already decoded items.

    Args:
        data: JSON text of a patch document, or an iterable of operations / wire dicts.

    Returns:
        The operations in document order.

    Raises:
        InvalidOperationError: If the document is not an array of objects.
    """
    items = JsonUtils.decode(data) if isinstance(data, (bytes, str)) else data
    if isinstance(items, (dict, str)) or not isinstance(items, Iterable):
        raise InvalidOperationError(f"patch document must be an array, got {type(items).__name__}")

    operations: List[Operation] = []
    for item in items:
        if isinstance(item, Operation):
            operations.append(item)
        elif isinstance(item, dict):
            try:
                operations.append(Operation.model_validate(item))
            except ValidationError as e:
                raise InvalidOperationError(f"invalid patch operation {item!r}: {e}") from e
        else:
            raise InvalidOperationError(f"patch operation must be an object, got {type(item).__name__}")
    return operations
