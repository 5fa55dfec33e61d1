import os
import sys
import pytest

# Ensure the repository root (containing settings.py and the packages) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from core.engine import SessionEngine
from core.store import MemoryStore
from settings import TICK_INTERVAL_S


@pytest.fixture()
def store():
    return MemoryStore()


@pytest.fixture()
def engine(store):
    return SessionEngine(store)


@pytest.fixture()
def fire(engine):
    """Run `times` countdown firings on the engine, one interval at a time."""
    def _fire(times=1):
        fired = 0
        for _ in range(times):
            fired += engine.advance(TICK_INTERVAL_S)
        return fired
    return _fire
