"""Shared fakes for the external window/space handlers."""

import pytest

from tiling_ipc.config_store import SPLIT_RATIO, InMemoryConfigStore
from tiling_ipc.daemon import TilingDaemon
from tiling_ipc.settings import ConfigDefaults


class RecordingWindowHandlers:
    """Records every window action; ``temporary_ratio`` writes the store."""

    def __init__(self, store, calls):
        self.store = store
        self.calls = calls

    def focus_window(self, direction):
        self.calls.append(("focus_window", direction))

    def swap_window(self, direction):
        self.calls.append(("swap_window", direction))

    def use_insertion_point(self, direction):
        self.calls.append(("use_insertion_point", direction))

    def move_window(self, direction):
        self.calls.append(("move_window", direction))

    def toggle_window(self, state):
        self.calls.append(("toggle_window", state))

    def temporary_ratio(self, ratio):
        self.calls.append(("temporary_ratio", ratio))
        self.store.update(SPLIT_RATIO, float(ratio))


class RecordingSpaceHandlers:
    def __init__(self, calls):
        self.calls = calls

    def rotate_window_tree(self, degrees):
        self.calls.append(("rotate_window_tree", degrees))


class RecordingStore(InMemoryConfigStore):
    """In-memory store that also records each update call."""

    def __init__(self):
        super().__init__(ConfigDefaults().as_store_values())
        self.updates = []

    def update(self, key, value, *, space=None):
        self.updates.append((key, value, space))
        super().update(key, value, space=space)


@pytest.fixture
def calls():
    return []


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def window_handlers(store, calls):
    return RecordingWindowHandlers(store, calls)


@pytest.fixture
def space_handlers(calls):
    return RecordingSpaceHandlers(calls)


@pytest.fixture
def daemon(window_handlers, space_handlers, store):
    return TilingDaemon(window_handlers, space_handlers, store)
