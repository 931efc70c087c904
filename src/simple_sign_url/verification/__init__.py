"""
simple-sign-url - Verification Module

Signed URL verification, request extraction and middleware adapters.
"""

from .types import (
    VerificationStatus,
    VerificationResult,
)

from .verifier import (
    verify_url,
    verify_url_async,
    verify_request,
    verify_request_async,
    signatures_match,
)

from .request import (
    CustomRequest,
    get_url_from_request,
    validate_request,
)

from .middleware import (
    SignedUrlMiddleware,
    AsyncSignedUrlMiddleware,
    create_verifier,
    create_async_verifier,
    create_fastapi_verification_middleware,
    create_rejection_error,
    request_from_starlette,
)

__all__ = [
    # Types
    'VerificationStatus',
    'VerificationResult',
    # Verifier
    'verify_url',
    'verify_url_async',
    'verify_request',
    'verify_request_async',
    'signatures_match',
    # Request extraction
    'CustomRequest',
    'get_url_from_request',
    'validate_request',
    # Middleware
    'SignedUrlMiddleware',
    'AsyncSignedUrlMiddleware',
    'create_verifier',
    'create_async_verifier',
    'create_fastapi_verification_middleware',
    'create_rejection_error',
    'request_from_starlette',
]
