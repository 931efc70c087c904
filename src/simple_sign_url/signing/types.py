"""
Type definitions for signed URL generation

This module provides the immutable signer configuration and the metadata
carried inside the `signed` query parameter.
"""

from typing import Callable, Optional, Union
from dataclasses import dataclass, field
from enum import Enum

from ..constants import (
    DEFAULT_ALGORITHM,
    DEFAULT_TTL,
    SECRET_KEY_UNDEFINED,
    SECRET_KEY_WRONG_TYPE,
    TTL_WRONG_TYPE,
    ALGORITHM_WRONG_TYPE,
)
from ..exceptions import ConfigError, ErrorCodes
from .derivation import _get_hash_algorithm


class HttpMethod(str, Enum):
    """Common HTTP methods"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


@dataclass(frozen=True)
class SignerConfig:
    """
    Configuration shared by signing and verification
    
    Attributes:
        secret_key: Secret used as the key derivation salt
        ttl: Lifetime of a signed URL in seconds
        algorithm: Hash algorithm name for the PBKDF2 HMAC
        timestamp_generator: Optional custom clock returning Unix time
        nonce_generator: Optional custom nonce generator
    """
    secret_key: Union[str, bytes] = field(repr=False)
    ttl: int = DEFAULT_TTL
    algorithm: str = DEFAULT_ALGORITHM
    timestamp_generator: Optional[Callable[[], float]] = field(default=None, compare=False, repr=False)
    nonce_generator: Optional[Callable[[], int]] = field(default=None, compare=False, repr=False)
    
    def __post_init__(self):
        """Validate signer configuration"""
        if self.secret_key is None or (isinstance(self.secret_key, (str, bytes)) and not self.secret_key):
            raise ConfigError(SECRET_KEY_UNDEFINED, ErrorCodes.MISSING_SECRET)
        
        if not isinstance(self.secret_key, (str, bytes)):
            raise ConfigError(
                SECRET_KEY_WRONG_TYPE,
                ErrorCodes.INVALID_SECRET,
                {"type": type(self.secret_key).__name__}
            )
        
        # bool is an int subclass but never a meaningful ttl
        if isinstance(self.ttl, bool) or not isinstance(self.ttl, int) or self.ttl <= 0:
            raise ConfigError(TTL_WRONG_TYPE, ErrorCodes.INVALID_TTL, {"ttl": repr(self.ttl)})
        
        if not isinstance(self.algorithm, str) or not self.algorithm:
            raise ConfigError(
                ALGORITHM_WRONG_TYPE,
                ErrorCodes.INVALID_ALGORITHM,
                {"algorithm": repr(self.algorithm)}
            )
        
        _get_hash_algorithm(self.algorithm)


@dataclass(frozen=True)
class SignedMetadata:
    """
    Metadata carried by the `signed` query parameter
    
    Attributes:
        expires_at: Unix time (whole seconds) after which the URL is expired
        method: Uppercase HTTP method the URL is bound to
        nonce: Random value; only perturbs the signature, never validated
    """
    expires_at: int
    method: str
    nonce: Union[int, str]
