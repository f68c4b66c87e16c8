"""Tests for tiling_ipc.config_store."""

import pytest

from tiling_ipc.config_store import SPLIT_RATIO, InMemoryConfigStore, SpaceMode, SplitMode


@pytest.fixture
def memory_store():
    return InMemoryConfigStore.with_defaults()


class TestGlobals:
    def test_defaults(self, memory_store):
        assert memory_store.value("space_mode") is SpaceMode.BSP
        assert memory_store.value("bsp_split_mode") is SplitMode.OPTIMAL
        assert memory_store.float_value(SPLIT_RATIO) == 0.5

    def test_update(self, memory_store):
        memory_store.update("mouse_follows_focus", 0)
        assert memory_store.value("mouse_follows_focus") == 0

    def test_unknown_key(self, memory_store):
        with pytest.raises(KeyError):
            memory_store.update("bogus_key", 1)
        with pytest.raises(KeyError):
            memory_store.value("bogus_key")


class TestSpaceOverrides:
    def test_falls_back_to_global(self, memory_store):
        assert memory_store.float_value("space_offset_top", space=3) == 40.0

    def test_override_is_scoped(self, memory_store):
        memory_store.update("space_offset_top", 20.0, space=3)
        assert memory_store.float_value("space_offset_top", space=3) == 20.0
        assert memory_store.float_value("space_offset_top", space=4) == 40.0
        assert memory_store.float_value("space_offset_top") == 40.0

    def test_global_change_visible_without_override(self, memory_store):
        memory_store.update("space_mode", SpaceMode.MONOCLE, space=2)
        memory_store.update("space_mode", SpaceMode.FLOAT)
        assert memory_store.value("space_mode", space=2) is SpaceMode.MONOCLE
        assert memory_store.value("space_mode", space=5) is SpaceMode.FLOAT

    def test_overrides_and_clear(self, memory_store):
        memory_store.update("space_offset_gap", 0.0, space=1)
        memory_store.update("space_offset_gap", 5.0, space=2)
        assert memory_store.overrides(1) == {"space_offset_gap": 0.0}
        memory_store.clear_overrides(1)
        assert memory_store.overrides(1) == {}
        assert memory_store.overrides(2) == {"space_offset_gap": 5.0}
        memory_store.clear_overrides()
        assert memory_store.overrides(2) == {}
