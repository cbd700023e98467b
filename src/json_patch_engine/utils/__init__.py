from .json_utils import JsonDict, JsonUtils

__all__ = [
    "JsonDict",
    "JsonUtils",
]
