import threading

import matplotlib

matplotlib.use("Agg")

import pytest

from biosim_monitor.streaming.buffers import SnapshotChannel


class FakeMusic:
    """Заменяет pygame.mixer.music: каждый трек "звучит" busy_polls опросов."""

    def __init__(self, busy_polls=3, broken=()):
        self.busy_polls = busy_polls
        self.broken = set(broken)
        self.loaded = []
        self.played = []
        self.stopped = False
        self._remaining = 0

    def load(self, path):
        if any(path.endswith(name) for name in self.broken):
            raise RuntimeError(f"cannot decode {path}")
        self.loaded.append(path)

    def play(self):
        self.played.append(self.loaded[-1])
        self._remaining = self.busy_polls

    def get_busy(self):
        if self._remaining > 0:
            self._remaining -= 1
            return True
        return False

    def stop(self):
        self.stopped = True
        self._remaining = 0


class FakeMixer:
    def __init__(self, **kwargs):
        self.music = FakeMusic(**kwargs)


@pytest.fixture
def make_mixer():
    return FakeMixer


@pytest.fixture
def channel():
    return SnapshotChannel()


@pytest.fixture
def stop_event():
    return threading.Event()
