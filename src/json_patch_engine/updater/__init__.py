from .json_patch_updater import JsonPatchUpdate, JsonPatchUpdater
from .state_updater import StateUpdater

__all__ = [
    "StateUpdater",
    "JsonPatchUpdate",
    "JsonPatchUpdater",
]
