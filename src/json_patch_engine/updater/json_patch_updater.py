from typing import List

from pydantic import BaseModel, Field

from json_patch_engine.models import Operation
from json_patch_engine.patcher import JsonPatcher
from json_patch_engine.updater.state_updater import StateUpdater
from json_patch_engine.utils import JsonDict, JsonUtils


class JsonPatchUpdate(BaseModel):
    """
    A JSON patch update of a state object.
    """

    operations: List[Operation] = Field(
        description="The operations to apply to the state.",
    )


class JsonPatchUpdater(StateUpdater):
    """
    Applies a JSON patch update to a copy of the state.
    """

    patcher = JsonPatcher()

    @staticmethod
    def apply_update(state: JsonDict, update: JsonDict) -> JsonDict:
        parsed_update = JsonPatchUpdate.model_validate(update)
        return JsonPatchUpdater.patcher.apply_in_place(JsonUtils.deep_copy(state), parsed_update.operations)
