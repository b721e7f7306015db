"""
Shared test fixtures and configuration for pytest
"""
from datetime import datetime

import pytest

from helperkit.core.email.dns_checks import DomainResolver
from helperkit.core.time.clock import FixedClock
from helperkit.utils import config_manager
from helperkit.utils.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point configuration at a temporary file and clear overrides"""
    for var in ("HELPERKIT_DNS_TIMEOUT", "HELPERKIT_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)

    config_path = tmp_path / "config.json"
    monkeypatch.setattr(config_manager, "CONFIG_PATH", config_path)
    ConfigManager.reset_instance()

    yield config_path

    ConfigManager.reset_instance()


@pytest.fixture
def fixed_now():
    """A Tuesday afternoon in January"""
    return datetime(2024, 1, 16, 14, 30, 45, 123000)


@pytest.fixture
def clock(fixed_now):
    """Clock pinned to fixed_now"""
    return FixedClock(fixed_now)


class FakeResolver(DomainResolver):
    """Resolver double recording queries instead of hitting the network"""

    def __init__(self, answer=None, error=None):
        super().__init__(timeout=1.0)
        self.answer = answer if answer is not None else ["record"]
        self.error = error
        self.calls = []

    async def resolve(self, domain, rdtype, timeout=None):
        self.calls.append((domain, rdtype, timeout))
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def resolver():
    """Resolver that answers every query with one record"""
    return FakeResolver()


@pytest.fixture
def failing_resolver():
    """Resolver that fails every query"""
    from helperkit.utils.errors import ResolutionFailureError

    return FakeResolver(error=ResolutionFailureError("NXDOMAIN"))


@pytest.fixture
def empty_resolver():
    """Resolver that answers with no records"""
    return FakeResolver(answer=[])
