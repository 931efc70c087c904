"""
Type definitions for signed URL verification
"""

from typing import Optional
from dataclasses import dataclass
from enum import Enum

from ..constants import HTTP_BAD_REQUEST, HTTP_FORBIDDEN, HTTP_EXPIRED
from ..signing.types import SignedMetadata


class VerificationStatus(str, Enum):
    """Verification result status"""
    VALID = "valid"
    SIGNATURE_INVALID = "signature_invalid"
    METHOD_MISMATCH = "method_mismatch"
    EXPIRED = "expired"
    MALFORMED = "malformed"


_HTTP_STATUS = {
    VerificationStatus.VALID: None,
    VerificationStatus.SIGNATURE_INVALID: HTTP_FORBIDDEN,
    VerificationStatus.METHOD_MISMATCH: HTTP_FORBIDDEN,
    VerificationStatus.EXPIRED: HTTP_EXPIRED,
    VerificationStatus.MALFORMED: HTTP_BAD_REQUEST,
}


@dataclass(frozen=True)
class VerificationResult:
    """
    Outcome of verifying a signed URL
    
    Attributes:
        status: Terminal verification state
        message: Human readable reason
        metadata: Decoded metadata, only set once the signature checked out
    """
    status: VerificationStatus
    message: str = ""
    metadata: Optional[SignedMetadata] = None
    
    @property
    def is_valid(self) -> bool:
        return self.status == VerificationStatus.VALID
    
    @property
    def http_status(self) -> Optional[int]:
        """HTTP status a rejecting server should answer with"""
        return _HTTP_STATUS[self.status]
