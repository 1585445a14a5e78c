"""Shared test fixtures for transfer-list."""

import pandas as pd
import pytest


@pytest.fixture
def small_dataset():
    """Three items, the middle one disabled."""
    return [
        {"key": "1", "title": "one"},
        {"key": "2", "title": "two", "disabled": True},
        {"key": "3", "title": "three"},
    ]


@pytest.fixture
def ten_items():
    """Ten enabled items keyed '0'..'9'."""
    return [{"key": str(i), "title": f"content{i}"} for i in range(10)]


@pytest.fixture
def item_frame():
    """Item DataFrame indexed by key with a disabled flag."""
    return pd.DataFrame(
        {
            "title": ["alpha", "beta", "gamma"],
            "disabled": [False, True, None],
        },
        index=["a", "b", "c"],
    )


class CallbackRecorder:
    """Records on_change / on_select_change calls in firing order."""

    def __init__(self):
        self.events = []

    def on_change(self, target_keys, direction, moved_keys):
        self.events.append(("change", target_keys, direction, moved_keys))

    def on_select_change(self, source_keys, target_keys):
        self.events.append(("select", source_keys, target_keys))

    @property
    def changes(self):
        return [e for e in self.events if e[0] == "change"]

    @property
    def selects(self):
        return [e for e in self.events if e[0] == "select"]


@pytest.fixture
def recorder():
    return CallbackRecorder()
