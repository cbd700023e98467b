import json
import re
from typing import Any, Dict, Union

from pydantic import JsonValue

JsonDict = Dict[str, JsonValue]

# Characters escaped when HTML-safe output is requested. U+2028 and U+2029 are
# always escaped so the output stays embeddable in script tags.
_HTML_ESCAPES = {ch: f"\\u{ord(ch):04x}" for ch in "<>&"}
_LINE_SEPARATOR_ESCAPES = {ch: f"\\u{ord(ch):04x}" for ch in (chr(0x2028), chr(0x2029))}

# A literal newline and the one-space-per-level indentation following it.
_LAYOUT_RE = re.compile(r"\n( *)")


class JsonUtils:
    @staticmethod
    def deep_copy(value: Any) -> Any:
        """
        Recursively clone a JSON value. Containers are rebuilt, scalars are shared.

        Args:
            value: The value to copy.

        Returns:
            A structurally equal value sharing no containers with the input.
        """
        if isinstance(value, list):
            return [JsonUtils.deep_copy(item) for item in value]
        if isinstance(value, dict):
            return {key: JsonUtils.deep_copy(item) for key, item in value.items()}
        return value

    @staticmethod
    def equal(left: Any, right: Any) -> bool:
        """
        Deep structural equality of two JSON values.

        Numbers compare by value (``1 == 1.0``) but booleans never equal numbers,
        and object key order is ignored.
        """
        if isinstance(left, bool) or isinstance(right, bool):
            return isinstance(left, bool) and isinstance(right, bool) and left == right
        if isinstance(left, (int, float)) and isinstance(right, (int, float)):
            return left == right
        if isinstance(left, dict) and isinstance(right, dict):
            if left.keys() != right.keys():
                return False
            return all(JsonUtils.equal(item, right[key]) for key, item in left.items())
        if isinstance(left, list) and isinstance(right, list):
            if len(left) != len(right):
                return False
            return all(JsonUtils.equal(a, b) for a, b in zip(left, right))
        return type(left) is type(right) and left == right

    @staticmethod
    def decode(document: Union[bytes, str]) -> Any:
        """
        Decode a serialized JSON document.

        Raises:
            json.JSONDecodeError: If the document is not valid JSON.
        """
        return json.loads(document)

    @staticmethod
    def encode(
        value: Any,
        prefix: str = "",
        indent: str = "",
        escape_html: bool = False,
        sort_keys: bool = False,
    ) -> bytes:
        """
        Encode a JSON value to UTF-8 bytes terminated by a newline.

        Args:
            value: The value to encode.
            prefix: Prepended to every line after the first when pretty-printing.
            indent: Indentation unit. Output is compact when both prefix and indent are empty.
            escape_html: Escape '<', '>' and '&' inside strings.
            sort_keys: Emit object keys in sorted order instead of insertion order.

        Returns:
            The encoded document.
        """
        pretty = bool(prefix or indent)
        if pretty:
            text = json.dumps(value, ensure_ascii=False, indent=1, separators=(",", ": "), sort_keys=sort_keys)
        else:
            text = json.dumps(value, ensure_ascii=False, separators=(",", ":"), sort_keys=sort_keys)

        # Escaping runs before the layout is rewritten, so it only touches string tokens.
        escapes = dict(_LINE_SEPARATOR_ESCAPES)
        if escape_html:
            escapes.update(_HTML_ESCAPES)
        for ch, escaped in escapes.items():
            text = text.replace(ch, escaped)

        if pretty:
            # Literal newlines only occur between tokens; strings carry them escaped.
            text = _LAYOUT_RE.sub(lambda m: "\n" + prefix + indent * len(m.group(1)), text)

        return (text + "\n").encode("utf-8")
