import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)


@pytest.fixture
def clock():
    from tests.utils import ManualClock
    return ManualClock()


@pytest.fixture
def gate(clock):
    from ai.cooldown import CooldownGate
    return CooldownGate(10, clock=clock)


@pytest.fixture
def snapshot():
    import portfolio
    return portfolio.get_portfolio_snapshot()


@pytest.fixture
def offline_settings():
    """Settings that ignore the developer's .env and real environment keys."""
    from config import Settings
    return Settings(
        _env_file=None,
        llm_provider="anthropic",
        anthropic_api_key="",
        openai_api_key="",
        ai_cooldown_seconds=30,
        ai_cooldown_overrides={},
    )
