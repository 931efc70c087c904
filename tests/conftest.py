"""
Shared fixtures for simple-sign-url tests
"""

from urllib.parse import urlsplit

import pytest

from simple_sign_url.signing import SignerConfig
from simple_sign_url.verification import CustomRequest


class FakeClock:
    """Controllable clock for expiry tests"""
    
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now
    
    def __call__(self) -> float:
        return self.now
    
    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Fixed clock starting at a known Unix time"""
    return FakeClock()


@pytest.fixture
def config(clock):
    """Signer config with an injected clock"""
    return SignerConfig(secret_key="s3cret", ttl=60, timestamp_generator=clock)


def request_for(url: str, method: str = "GET") -> CustomRequest:
    """Build a CustomRequest for a full URL"""
    parts = urlsplit(url)
    original_url = f"{parts.path}?{parts.query}" if parts.query else parts.path
    return CustomRequest(
        protocol=parts.scheme,
        host=parts.netloc,
        original_url=original_url,
        method=method,
    )


@pytest.fixture
def make_request():
    """Factory building a CustomRequest from a full URL"""
    return request_for
