"""
Signature derivation for signed URLs

The signature token is a PBKDF2-HMAC derivation that uses the canonical URL
as the password and the secret key as the salt. The output is rendered as a
lowercase hex string so it can be appended to a URL verbatim.
"""

import logging
from typing import Dict, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ..constants import ITERATION_COUNT, HASH_LENGTH, ALGORITHM_UNSUPPORTED
from ..exceptions import ConfigError, SignUrlError, ErrorCodes
from .utils import PerformanceTimer, to_bytes

logger = logging.getLogger(__name__)

# Hash names follow Node/OpenSSL naming ('sha512'); '-' and case are ignored.
HASH_ALGORITHMS = {
    'sha1': hashes.SHA1,
    'sha224': hashes.SHA224,
    'sha256': hashes.SHA256,
    'sha384': hashes.SHA384,
    'sha512': hashes.SHA512,
    'sha512_224': hashes.SHA512_224,
    'sha512_256': hashes.SHA512_256,
    'sha3_224': hashes.SHA3_224,
    'sha3_256': hashes.SHA3_256,
    'sha3_384': hashes.SHA3_384,
    'sha3_512': hashes.SHA3_512,
}


def normalize_algorithm_name(algorithm: str) -> str:
    """
    Normalize a hash algorithm name for lookup.
    
    Args:
        algorithm: Algorithm name such as 'sha512', 'SHA-512' or 'sha3-256'
        
    Returns:
        str: Normalized name ('sha512', 'sha3_256', ...)
    """
    name = algorithm.strip().lower()
    if name.startswith('sha3-') or name.startswith('sha512-'):
        return name.replace('-', '_')
    return name.replace('-', '')


def is_supported_algorithm(algorithm: str) -> bool:
    """Check whether a hash algorithm name can be used for derivation"""
    return normalize_algorithm_name(algorithm) in HASH_ALGORITHMS


def get_supported_algorithms() -> Dict[str, str]:
    """Map of supported algorithm names to the cryptography hash name"""
    return {name: algo.name for name, algo in HASH_ALGORITHMS.items()}


def _get_hash_algorithm(algorithm: str) -> hashes.HashAlgorithm:
    """Get hash algorithm object from name"""
    name = normalize_algorithm_name(algorithm)
    if name not in HASH_ALGORITHMS:
        raise ConfigError(
            f"{ALGORITHM_UNSUPPORTED}: {algorithm}",
            ErrorCodes.UNSUPPORTED_ALGORITHM,
            {"algorithm": algorithm, "supported": sorted(HASH_ALGORITHMS)}
        )
    return HASH_ALGORITHMS[name]()


def derive_signature(canonical_string: str,
                     secret_key: Union[str, bytes],
                     algorithm: str) -> str:
    """
    Derive the signature token for a canonical URL.
    
    Identical inputs always produce an identical token; verification relies
    on recomputing it.
    
    Args:
        canonical_string: Canonical URL (everything up to and including the terminator)
        secret_key: Secret used as the PBKDF2 salt
        algorithm: Hash algorithm name used by the PBKDF2 HMAC
        
    Returns:
        str: Lowercase hex token of HASH_LENGTH bytes
        
    Raises:
        ConfigError: If the algorithm is not supported
        SignUrlError: If the derivation itself fails
    """
    hash_algorithm = _get_hash_algorithm(algorithm)
    timer = PerformanceTimer()
    
    try:
        kdf = PBKDF2HMAC(
            algorithm=hash_algorithm,
            length=HASH_LENGTH,
            salt=to_bytes(secret_key),
            iterations=ITERATION_COUNT,
        )
        token = kdf.derive(canonical_string.encode('utf-8')).hex()
    except Exception as e:
        raise SignUrlError(
            f"Signature derivation failed: {e}",
            ErrorCodes.DERIVATION_FAILED,
            {"algorithm": algorithm, "original_error": str(e)}
        )
    
    logger.debug(f"Derived {algorithm} signature in {timer.elapsed_ms():.2f}ms")
    return token
