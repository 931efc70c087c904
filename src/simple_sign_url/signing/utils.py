"""
Utility functions for signed URLs

Timestamp and nonce generation plus small helpers shared by the signing and
verification modules.
"""

import math
import secrets
import time
from typing import Union

from ..constants import MAX_RANDOM_VALUE


def generate_timestamp() -> float:
    """
    Current Unix time.
    
    Returns:
        float: Seconds since epoch
    """
    return time.time()


def to_epoch_seconds(timestamp: float) -> int:
    """
    Round a Unix timestamp up to whole seconds.
    
    Both expiry generation and expiry checks go through this so they use
    the same granularity.
    """
    return math.ceil(timestamp)


def generate_nonce() -> int:
    """
    Generate the random value that perturbs otherwise identical signatures.
    
    Returns:
        int: Random integer in [0, MAX_RANDOM_VALUE)
    """
    return secrets.randbelow(MAX_RANDOM_VALUE)


def to_bytes(value: Union[str, bytes]) -> bytes:
    """Encode a str as UTF-8, pass bytes through"""
    if isinstance(value, bytes):
        return value
    return value.encode('utf-8')


class PerformanceTimer:
    """Simple performance timer for monitoring derivation cost."""
    
    def __init__(self):
        self.start_time = time.perf_counter()
    
    def elapsed_ms(self) -> float:
        """Get elapsed time in milliseconds."""
        return (time.perf_counter() - self.start_time) * 1000
