"""
Signed URL generation

Builds fresh metadata for every call, canonicalizes the URL and appends the
derived signature token.
"""

import asyncio
import logging
import re
from concurrent.futures import Executor
from functools import partial
from typing import Optional

from ..constants import HTTP_METHOD_PARAM_UNDEFINED
from ..exceptions import InputError, ErrorCodes
from .types import SignerConfig, SignedMetadata
from .metadata import encode_metadata
from .canonical_url import canonicalize, validate_base_url
from .derivation import derive_signature
from .utils import generate_timestamp, generate_nonce, to_epoch_seconds

logger = logging.getLogger(__name__)

# RFC 9110 token characters
_METHOD_PATTERN = re.compile(r"[!#$%&'*+.^_`|~0-9A-Za-z-]+")


def current_time_seconds(config: SignerConfig) -> int:
    """Current time in whole seconds according to the config's clock"""
    clock = config.timestamp_generator or generate_timestamp
    return to_epoch_seconds(clock())


def create_metadata(config: SignerConfig, http_method: str) -> SignedMetadata:
    """
    Build metadata for a new signed URL.
    
    Args:
        config: Signer configuration
        http_method: HTTP method the URL will be bound to
        
    Returns:
        SignedMetadata: Expiry, uppercase method and a fresh nonce
    """
    nonce_gen = config.nonce_generator or generate_nonce
    return SignedMetadata(
        expires_at=current_time_seconds(config) + config.ttl,
        method=http_method.upper(),
        nonce=nonce_gen(),
    )


def sign_url(config: SignerConfig, url: str, http_method: str) -> str:
    """
    Generate a signed URL.
    
    Args:
        config: Signer configuration
        url: Full URL to sign; must not end with '/'
        http_method: HTTP method the URL may be used with
        
    Returns:
        str: URL with the `signed` parameter and signature appended
        
    Raises:
        InputError: If url or http_method is missing or invalid
    """
    validate_base_url(url)
    
    if not isinstance(http_method, str) or not _METHOD_PATTERN.fullmatch(http_method):
        raise InputError(
            HTTP_METHOD_PARAM_UNDEFINED,
            ErrorCodes.INVALID_METHOD,
            {"http_method": repr(http_method)}
        )
    
    metadata = create_metadata(config, http_method)
    canonical = canonicalize(url, encode_metadata(metadata))
    token = derive_signature(canonical, config.secret_key, config.algorithm)
    
    logger.debug(f"Signed {metadata.method} URL expiring at {metadata.expires_at}")
    return f"{canonical}{token}"


async def sign_url_async(
    config: SignerConfig,
    url: str,
    http_method: str,
    executor: Optional[Executor] = None
) -> str:
    """
    Generate a signed URL without blocking the event loop.
    
    The key derivation runs in `executor` (the loop's default executor when
    None).
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(executor, partial(sign_url, config, url, http_method))
