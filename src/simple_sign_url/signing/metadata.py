"""
Encoding of the `signed` query parameter value

Metadata is serialised as `e:<expires>;m:<METHOD>;r:<nonce>` and the whole
blob is percent-encoded, so neither separator can collide with the URL's
own query syntax.
"""

from typing import Dict, Optional
from urllib.parse import quote, unquote

from ..constants import (
    METADATA_SEP,
    METADATA_EQ,
    METADATA_EXPIRES_KEY,
    METADATA_METHOD_KEY,
    METADATA_NONCE_KEY,
)
from .types import SignedMetadata

_EXPECTED_KEYS = {METADATA_EXPIRES_KEY, METADATA_METHOD_KEY, METADATA_NONCE_KEY}


def encode_metadata(metadata: SignedMetadata) -> str:
    """
    Serialise and percent-encode metadata.
    
    Args:
        metadata: Metadata to encode
        
    Returns:
        str: Value for the `signed` query parameter (without the signature)
    """
    pairs = [
        (METADATA_EXPIRES_KEY, str(metadata.expires_at)),
        (METADATA_METHOD_KEY, metadata.method.upper()),
        (METADATA_NONCE_KEY, str(metadata.nonce)),
    ]
    blob = METADATA_SEP.join(f"{key}{METADATA_EQ}{value}" for key, value in pairs)
    return quote(blob, safe='')


def _parse_pairs(blob: str) -> Optional[Dict[str, str]]:
    pairs = {}
    for item in blob.split(METADATA_SEP):
        key, eq, value = item.partition(METADATA_EQ)
        if not eq or key in pairs:
            return None
        pairs[key] = value
    return pairs


def decode_metadata(encoded: str) -> Optional[SignedMetadata]:
    """
    Decode a `signed` parameter value back into metadata.
    
    Args:
        encoded: Percent-encoded metadata blob
        
    Returns:
        SignedMetadata, or None when the value is malformed
    """
    if not isinstance(encoded, str) or not encoded:
        return None
    
    pairs = _parse_pairs(unquote(encoded))
    if pairs is None or set(pairs) != _EXPECTED_KEYS:
        return None
    
    try:
        expires_at = int(pairs[METADATA_EXPIRES_KEY])
    except ValueError:
        return None
    
    method = pairs[METADATA_METHOD_KEY].upper()
    if not method:
        return None
    
    nonce = pairs[METADATA_NONCE_KEY]
    if nonce.isascii() and nonce.isdigit():
        nonce = int(nonce)
    
    return SignedMetadata(expires_at=expires_at, method=method, nonce=nonce)
