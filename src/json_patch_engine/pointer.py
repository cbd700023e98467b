"""
JSON Pointer (https://datatracker.ietf.org/doc/html/rfc6901).

A pointer keeps its original, still escaped, string. Segment derivations are
pure and never fail; only `JsonPointer.check` rejects malformed pointers.
"""

from typing import Iterable, List

from json_patch_engine.errors import MalformedPointerError


def unescape_token(token: str) -> str:
    """
    Decode one reference token.

    '~1' is replaced before '~0' so that '~01' becomes '~1' and not '/'.
    """
    return token.replace("~1", "/").replace("~0", "~")


def escape_token(token: str) -> str:
    """Encode one reference token, the inverse of `unescape_token`."""
    return token.replace("~", "~0").replace("/", "~1")


class JsonPointer:
    """
    A JSON Pointer addressing one node of a document.
    """

    __slots__ = ("origin",)

    def __init__(self, origin: str):
        self.origin = origin

    @classmethod
    def from_segments(cls, segments: Iterable[str]) -> "JsonPointer":
        """Build a pointer from unescaped segments."""
        return cls("".join("/" + escape_token(segment) for segment in segments))

    def check(self) -> None:
        """
        Validate the pointer syntax.

        Raises:
            MalformedPointerError: If the pointer is not empty and does not start with '/'.
        """
        if self.origin and not self.origin.startswith("/"):
            raise MalformedPointerError(f"json pointer must start with /: {self.origin!r}")

    def is_whole_document(self) -> bool:
        return self.origin == ""

    @property
    def segments(self) -> List[str]:
        return [unescape_token(part) for part in self.origin.split("/")[1:]]

    def parent_segments(self) -> List[str]:
        return self.segments[:-1]

    def last_segment(self) -> str:
        segments = self.segments
        return segments[-1] if segments else ""

    def same_parent_as(self, other: "JsonPointer") -> bool:
        return self.parent_segments() == other.parent_segments()

    def is_prefix_of(self, other: "JsonPointer") -> bool:
        """True if `other` addresses a node strictly below this pointer."""
        mine, theirs = self.segments, other.segments
        return len(mine) < len(theirs) and theirs[: len(mine)] == mine

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonPointer):
            return NotImplemented
        return self.origin == other.origin

    def __hash__(self) -> int:
        return hash(self.origin)

    def __str__(self) -> str:
        return self.origin

    def __repr__(self) -> str:
        return f"JsonPointer({self.origin!r})"
