"""Pytest fixtures for picklist tests."""

from contextlib import contextmanager

import pytest


class ScriptedKeys:
    """Key source that replays a fixed list of keys.

    Records how it was used so tests can check the terminal was
    entered and restored.
    """

    def __init__(self, keys, tty=True, error=None):
        self.pending = list(keys)
        self.tty = tty
        self.error = error  # raised once the script runs out
        self.reads = 0
        self.raw_entered = 0
        self.raw_active = False

    def isatty(self):
        return self.tty

    @contextmanager
    def raw_mode(self):
        self.raw_entered += 1
        self.raw_active = True
        try:
            yield
        finally:
            self.raw_active = False

    def read_key(self):
        if not self.pending:
            raise self.error or OSError("script exhausted")
        self.reads += 1
        return self.pending.pop(0)


class RecordingRenderer:
    """Renderer that keeps every frame instead of drawing it."""

    def __init__(self, fail_on_draw=None):
        self.frames = []
        self.events = []
        self.is_open = False
        self.fail_on_draw = fail_on_draw

    def open(self):
        self.events.append("open")
        self.is_open = True

    def draw(self, rows):
        if self.fail_on_draw is not None and len(self.frames) == self.fail_on_draw:
            raise OSError("broken pipe")
        self.events.append("draw")
        self.frames.append(list(rows))

    def close(self):
        self.events.append("close")
        self.is_open = False


@pytest.fixture
def scripted_keys():
    """Factory for ScriptedKeys."""
    return ScriptedKeys


@pytest.fixture
def make_renderer():
    """Factory for RecordingRenderer."""
    return RecordingRenderer


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def fruits():
    from picklist.items import items_from_labels

    return items_from_labels(["apple", "banana", "berry"])


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config at an empty directory and clear the cache around each test."""
    from picklist.config import clear_config_cache

    monkeypatch.setenv("PICKLIST_CONFIG_DIR", str(tmp_path / "config"))
    clear_config_cache()

    yield

    clear_config_cache()
