"""Shared test fixtures for Manuscript Insight tests."""

import pytest

from manuscript_insight.analyzers import default_analyzers
from manuscript_insight.engine import AnalyzerRegistry
from manuscript_insight.models import ManuscriptInput


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


SAMPLE_CHAPTER = """# The Lighthouse

Mara climbed the stairs of the old lighthouse while the storm battered the glass. She heard the wind howl against the stones, and she smelled salt and smoke drifting up from the harbor below.

"We have to leave now," Tomas said. He grabbed her arm and pulled her toward the door.

"Not yet," Mara whispered. "I need to see the signal."

She remembered the night her father vanished years ago, when the sea had taken everything from them. Back then she had been afraid of the dark water. Now she was only angry.

Suddenly the lamp flared. Mara ran to the window, her heart pounding with fear and hope. The ship was there, fighting the waves, struggling against the rocks.

Tomas shouted at her, but she could not hear him over the thunder. She felt the cold rail under her fingers and tasted the bitter rain on her lips.

# The Harbor

Morning came slowly. Mara sat on the pier and thought about what she had seen. Why had the ship returned? What did it mean for the village, and for her?

She decided she would find the captain and ask him herself. Whatever the truth was, she was ready to face it.
"""


@pytest.fixture
def sample_text():
    """A short two-section chapter with dialogue, conflict and sensory detail."""
    return SAMPLE_CHAPTER


@pytest.fixture
def sample_manuscript():
    return ManuscriptInput.from_text("lighthouse", SAMPLE_CHAPTER, genre="literary")


@pytest.fixture
def empty_manuscript():
    return ManuscriptInput.from_text("empty", "")


class StubAnalyzer:
    """Analyzer returning a fixed result (or raising) for one slot."""

    def __init__(self, name, result=None, error=None):
        self.name = name
        self.result = result
        self.error = error
        self.calls = []

    def analyze(self, text, genre=None):
        self.calls.append((text, genre))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def make_registry():
    """Factory: the default registry with some slots rebound to given analyzers."""

    def _make(*overrides):
        registry = AnalyzerRegistry(default_analyzers())
        for analyzer in overrides:
            registry.register(analyzer)
        return registry

    return _make
