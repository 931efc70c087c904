"""
Signed URL verification

Recomputes the signature over the canonical part of an incoming URL and
classifies the request. The signature is always checked before any
metadata field, so metadata cannot be probed without a valid signature.
"""

import asyncio
import hmac
import logging
from concurrent.futures import Executor
from functools import partial
from typing import Any, Optional

from ..constants import (
    SIGNED_PARAM_UNDEFINED,
    SIGNED_PARAM_MALFORMED,
    URL_SIGNATURE_IS_NOT_VALID,
    HTTP_METHOD_NOT_ALLOWED,
    SIGNED_URL_EXPIRED,
)
from ..signing.types import SignerConfig
from ..signing.canonical_url import find_signed_param, split_signed_url
from ..signing.metadata import decode_metadata
from ..signing.derivation import derive_signature
from ..signing.signer import current_time_seconds
from .types import VerificationResult, VerificationStatus
from .request import get_url_from_request

logger = logging.getLogger(__name__)


def signatures_match(expected: str, received: str) -> bool:
    """Constant-time comparison of two signature tokens"""
    return hmac.compare_digest(expected.encode('utf-8'), received.encode('utf-8'))


def verify_url(config: SignerConfig, url: str, http_method: str) -> VerificationResult:
    """
    Verify a signed URL for the given request method.
    
    Args:
        config: Signer configuration used when the URL was signed
        url: Full incoming URL, including the `signed` parameter
        http_method: Method of the incoming request
        
    Returns:
        VerificationResult: VALID, SIGNATURE_INVALID, METHOD_MISMATCH,
        EXPIRED or MALFORMED
    """
    if not isinstance(url, str) or find_signed_param(url) == -1:
        logger.debug("Signed parameter not found in URL")
        return VerificationResult(VerificationStatus.MALFORMED, SIGNED_PARAM_UNDEFINED)
    
    parts = split_signed_url(url)
    if parts is None:
        logger.debug("Signed parameter has no signature terminator")
        return VerificationResult(VerificationStatus.MALFORMED, SIGNED_PARAM_MALFORMED)
    
    expected = derive_signature(parts.canonical, config.secret_key, config.algorithm)
    if not signatures_match(expected, parts.signature):
        logger.debug("URL signature mismatch")
        return VerificationResult(VerificationStatus.SIGNATURE_INVALID, URL_SIGNATURE_IS_NOT_VALID)
    
    metadata = decode_metadata(parts.encoded_metadata)
    if metadata is None:
        return VerificationResult(VerificationStatus.MALFORMED, SIGNED_PARAM_MALFORMED)
    
    if not isinstance(http_method, str) or metadata.method != http_method.upper():
        logger.debug(f"Method mismatch: signed for {metadata.method}, got {http_method}")
        return VerificationResult(VerificationStatus.METHOD_MISMATCH, HTTP_METHOD_NOT_ALLOWED, metadata)
    
    if metadata.expires_at < current_time_seconds(config):
        logger.debug(f"Signed URL expired at {metadata.expires_at}")
        return VerificationResult(VerificationStatus.EXPIRED, SIGNED_URL_EXPIRED, metadata)
    
    return VerificationResult(VerificationStatus.VALID, metadata=metadata)


def verify_request(config: SignerConfig, request: Any) -> VerificationResult:
    """
    Verify the URL and method of a request object.
    
    Args:
        config: Signer configuration
        request: CustomRequest or compatible object
        
    Returns:
        VerificationResult: Classified result
        
    Raises:
        InputError: If the request object is missing required fields
    """
    url = get_url_from_request(request)
    return verify_url(config, url, request.method)


async def verify_url_async(
    config: SignerConfig,
    url: str,
    http_method: str,
    executor: Optional[Executor] = None
) -> VerificationResult:
    """verify_url with the key derivation moved off the event loop"""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(executor, partial(verify_url, config, url, http_method))


async def verify_request_async(
    config: SignerConfig,
    request: Any,
    executor: Optional[Executor] = None
) -> VerificationResult:
    """verify_request with the key derivation moved off the event loop"""
    url = get_url_from_request(request)
    return await verify_url_async(config, url, request.method, executor)
