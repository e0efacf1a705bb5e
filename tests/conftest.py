"""Pytest configuration and shared fixtures."""
import pytest

from floatchat.chat import DEFAULT_RESPONSE_DELAY, ChatSession, ManualScheduler
from floatchat.visualization import KeywordVisualizationSelector

# Environment variables read by floatchat.config
FLOATCHAT_ENV_VARS = (
    "CLIENT_URL",
    "FLOATCHAT_HOST",
    "PORT",
    "FLOATCHAT_RESPONSE_DELAY",
    "FLOATCHAT_SEED",
    "FLOATCHAT_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Keep the developer's environment out of settings tests."""
    for name in FLOATCHAT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def scheduler():
    """Return a virtual-clock scheduler."""
    return ManualScheduler()


@pytest.fixture
def selector():
    """Return a seeded keyword selector."""
    return KeywordVisualizationSelector(seed=42)


@pytest.fixture
def session(scheduler, selector):
    """Return a fresh chat session on the virtual clock."""
    return ChatSession(scheduler=scheduler, selector=selector)


@pytest.fixture
def reply_delay():
    """Return the default simulated reply latency."""
    return DEFAULT_RESPONSE_DELAY
