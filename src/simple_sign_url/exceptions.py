"""
Exception classes for simple-sign-url
"""

from typing import Optional, Dict, Any


class SignUrlError(Exception):
    """Base exception for all simple-sign-url errors"""
    
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (code: {self.error_code}, details: {self.details})"
        return f"{self.message} (code: {self.error_code})"


class ConfigError(SignUrlError):
    """Exception raised for invalid signer configuration"""
    pass


class InputError(SignUrlError):
    """Exception raised for invalid sign arguments or request objects"""
    pass


class SignedUrlHttpError(SignUrlError):
    """Exception raised by the default middleware handlers to reject a request"""
    
    def __init__(self, message: str, status_code: int, error_code: str = "HTTP_ERROR",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)
        self.status_code = status_code


class ErrorCodes:
    """Standard error codes"""
    
    # Configuration errors
    MISSING_SECRET = "MISSING_SECRET"
    INVALID_SECRET = "INVALID_SECRET"
    INVALID_TTL = "INVALID_TTL"
    INVALID_ALGORITHM = "INVALID_ALGORITHM"
    UNSUPPORTED_ALGORITHM = "UNSUPPORTED_ALGORITHM"
    
    # Input errors
    INVALID_URL = "INVALID_URL"
    INVALID_METHOD = "INVALID_METHOD"
    INVALID_REQUEST = "INVALID_REQUEST"
    
    # Derivation errors
    DERIVATION_FAILED = "DERIVATION_FAILED"
    
    # Middleware rejections
    SIGNED_PARAM_MISSING = "SIGNED_PARAM_MISSING"
    SIGNATURE_INVALID = "SIGNATURE_INVALID"
    METHOD_MISMATCH = "METHOD_MISMATCH"
    SIGNED_URL_EXPIRED = "SIGNED_URL_EXPIRED"
