import pytest

from json_patch_engine import JsonPatcher, PatchConfig


@pytest.fixture
def strict_config() -> PatchConfig:
    return PatchConfig()


@pytest.fixture
def lenient_config() -> PatchConfig:
    return PatchConfig(strict_path_exists=False)


@pytest.fixture
def negative_config() -> PatchConfig:
    return PatchConfig(support_negative_array_index=True)


@pytest.fixture
def patcher() -> JsonPatcher:
    return JsonPatcher()


@pytest.fixture
def lenient_patcher(lenient_config: PatchConfig) -> JsonPatcher:
    return JsonPatcher(lenient_config)
