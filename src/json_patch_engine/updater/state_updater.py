from abc import ABC, abstractmethod

from json_patch_engine.utils import JsonDict


class StateUpdater(ABC):
    @staticmethod
    @abstractmethod
    def apply_update(state: JsonDict, update: JsonDict) -> JsonDict:
        """
        Apply the update to the state.

        Args:
            state: The state to update. It is not modified.
            update: The update to apply.

        Returns:
            The updated state.
        """
        pass
