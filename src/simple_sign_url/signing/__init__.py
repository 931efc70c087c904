"""
simple-sign-url - Signing Module

Signed URL generation: configuration, metadata encoding, canonical URL
construction and PBKDF2 signature derivation.
"""

from .types import (
    SignerConfig,
    SignedMetadata,
    HttpMethod,
)

from .signer import (
    sign_url,
    sign_url_async,
    create_metadata,
    current_time_seconds,
)

from .metadata import (
    encode_metadata,
    decode_metadata,
)

from .canonical_url import (
    SignedUrlParts,
    canonicalize,
    find_signed_param,
    split_signed_url,
    strip_signed_param,
    validate_base_url,
)

from .derivation import (
    derive_signature,
    is_supported_algorithm,
    get_supported_algorithms,
)

from .utils import (
    generate_nonce,
    generate_timestamp,
)

# Public API exports
__all__ = [
    # Core signing functionality
    'sign_url',
    'sign_url_async',
    'create_metadata',
    'current_time_seconds',
    # Types
    'SignerConfig',
    'SignedMetadata',
    'HttpMethod',
    # Metadata codec
    'encode_metadata',
    'decode_metadata',
    # Canonical URL
    'SignedUrlParts',
    'canonicalize',
    'find_signed_param',
    'split_signed_url',
    'strip_signed_param',
    'validate_base_url',
    # Derivation
    'derive_signature',
    'is_supported_algorithm',
    'get_supported_algorithms',
    # Utilities
    'generate_nonce',
    'generate_timestamp',
]
