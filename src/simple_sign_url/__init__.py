"""
simple-sign-url
Time-limited, tamper-evident URLs signed with PBKDF2
"""

from .version import __version__
from .exceptions import (
    SignUrlError,
    ConfigError,
    InputError,
    SignedUrlHttpError,
    ErrorCodes,
)
from .signing import (
    SignerConfig,
    SignedMetadata,
    HttpMethod,
    sign_url,
    sign_url_async,
    encode_metadata,
    decode_metadata,
    canonicalize,
    strip_signed_param,
    derive_signature,
)
from .verification import (
    VerificationStatus,
    VerificationResult,
    CustomRequest,
    verify_url,
    verify_url_async,
    verify_request,
    verify_request_async,
    SignedUrlMiddleware,
    AsyncSignedUrlMiddleware,
    create_verifier,
    create_async_verifier,
    create_fastapi_verification_middleware,
)
from .config import SignUrlSettings, load_settings

__all__ = [
    '__version__',
    # Exceptions
    'SignUrlError',
    'ConfigError',
    'InputError',
    'SignedUrlHttpError',
    'ErrorCodes',
    # Signing
    'SignerConfig',
    'SignedMetadata',
    'HttpMethod',
    'sign_url',
    'sign_url_async',
    'encode_metadata',
    'decode_metadata',
    'canonicalize',
    'strip_signed_param',
    'derive_signature',
    # Verification
    'VerificationStatus',
    'VerificationResult',
    'CustomRequest',
    'verify_url',
    'verify_url_async',
    'verify_request',
    'verify_request_async',
    'SignedUrlMiddleware',
    'AsyncSignedUrlMiddleware',
    'create_verifier',
    'create_async_verifier',
    'create_fastapi_verification_middleware',
    # Configuration
    'SignUrlSettings',
    'load_settings',
]
