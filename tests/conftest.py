import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class RecordingReporter:
    def __init__(self):
        self.calls = []

    def __call__(self, game_name, score, user_id):
        self.calls.append((game_name, score, user_id))


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def reporter():
    return RecordingReporter()
