"""
Verification middleware for signed URLs

Maps a VerificationResult onto a request-processing chain: valid requests
have the `signed` parameter stripped and continue, everything else goes to
an injectable handler. The default handlers raise SignedUrlHttpError with
400 (malformed), 403 (invalid signature or method) or 410 (expired).
"""

import asyncio
import logging
from concurrent.futures import Executor
from typing import Any, Awaitable, Callable, Optional

from ..constants import (
    SIGNED_PARAM_UNDEFINED,
    URL_SIGNATURE_IS_NOT_VALID,
    HTTP_METHOD_NOT_ALLOWED,
    SIGNED_URL_EXPIRED,
    REQ_HOST_UNDEFINED,
)
from ..exceptions import SignedUrlHttpError, ErrorCodes
from ..signing.types import SignerConfig
from ..signing.canonical_url import strip_signed_param
from .types import VerificationResult, VerificationStatus
from .request import CustomRequest
from .verifier import verify_request, verify_request_async

logger = logging.getLogger(__name__)

Handler = Callable[[Any, VerificationResult], Any]

_REJECTIONS = {
    VerificationStatus.MALFORMED: (SIGNED_PARAM_UNDEFINED, ErrorCodes.SIGNED_PARAM_MISSING),
    VerificationStatus.SIGNATURE_INVALID: (URL_SIGNATURE_IS_NOT_VALID, ErrorCodes.SIGNATURE_INVALID),
    VerificationStatus.METHOD_MISMATCH: (HTTP_METHOD_NOT_ALLOWED, ErrorCodes.METHOD_MISMATCH),
    VerificationStatus.EXPIRED: (SIGNED_URL_EXPIRED, ErrorCodes.SIGNED_URL_EXPIRED),
}


def create_rejection_error(result: VerificationResult) -> SignedUrlHttpError:
    """Build the HTTP error matching a failed verification"""
    message, code = _REJECTIONS[result.status]
    return SignedUrlHttpError(
        result.message or message,
        result.http_status,
        code,
        {"status": result.status.value}
    )


def on_invalid_default(request: Any, result: VerificationResult) -> Any:
    """Reject with 400 or 403"""
    raise create_rejection_error(result)


def on_expired_default(request: Any, result: VerificationResult) -> Any:
    """Reject with 410"""
    raise create_rejection_error(result)


def strip_request_url(request: Any) -> None:
    """Remove the `signed` parameter from `request.original_url` in place"""
    request.original_url = strip_signed_param(request.original_url)


class SignedUrlMiddleware:
    """Synchronous middleware verifying signed URLs"""
    
    def __init__(self, config: SignerConfig,
                 on_invalid: Optional[Handler] = None,
                 on_expired: Optional[Handler] = None):
        self.config = config
        self.on_invalid = on_invalid or on_invalid_default
        self.on_expired = on_expired or on_expired_default
    
    def dispatch(self, request: Any, result: VerificationResult, call_next: Callable[[Any], Any]) -> Any:
        """Continue the chain or hand the request to a rejection handler"""
        if result.is_valid:
            strip_request_url(request)
            return call_next(request)
        
        logger.warning(f"Rejected signed URL request: {result.status.value}")
        if result.status == VerificationStatus.EXPIRED:
            return self.on_expired(request, result)
        return self.on_invalid(request, result)
    
    def __call__(self, request: Any, call_next: Callable[[Any], Any]) -> Any:
        result = verify_request(self.config, request)
        return self.dispatch(request, result, call_next)


class AsyncSignedUrlMiddleware(SignedUrlMiddleware):
    """
    Asynchronous middleware verifying signed URLs
    
    Key derivation runs in an executor so the event loop is never blocked.
    Handlers and `call_next` may be sync or async.
    """
    
    def __init__(self, config: SignerConfig,
                 on_invalid: Optional[Handler] = None,
                 on_expired: Optional[Handler] = None,
                 executor: Optional[Executor] = None):
        super().__init__(config, on_invalid, on_expired)
        self.executor = executor
    
    async def __call__(self, request: Any, call_next: Callable[[Any], Awaitable[Any]]) -> Any:
        result = await verify_request_async(self.config, request, self.executor)
        response = self.dispatch(request, result, call_next)
        if asyncio.iscoroutine(response):
            return await response
        return response


def create_verifier(config: SignerConfig,
                    on_invalid: Optional[Handler] = None,
                    on_expired: Optional[Handler] = None) -> SignedUrlMiddleware:
    """
    Create a synchronous signed URL middleware
    
    Args:
        config: Signer configuration
        on_invalid: Called with (request, result) for malformed, invalid or method mismatch
        on_expired: Called with (request, result) for expired URLs
        
    Returns:
        SignedUrlMiddleware: Callable taking (request, call_next)
    """
    return SignedUrlMiddleware(config, on_invalid, on_expired)


def create_async_verifier(config: SignerConfig,
                          on_invalid: Optional[Handler] = None,
                          on_expired: Optional[Handler] = None,
                          executor: Optional[Executor] = None) -> AsyncSignedUrlMiddleware:
    """
    Create an asynchronous signed URL middleware
    
    Returns:
        AsyncSignedUrlMiddleware: Awaitable callable taking (request, call_next)
    """
    return AsyncSignedUrlMiddleware(config, on_invalid, on_expired, executor)


# Framework-specific middleware creators

def request_from_starlette(request: Any) -> CustomRequest:
    """
    Build a CustomRequest from a Starlette/FastAPI request
    
    The raw path and query string are used so percent-encoding is preserved
    exactly as it was signed.
    """
    scope = request.scope
    raw_path = scope.get('raw_path')
    if raw_path:
        path = raw_path.split(b'?', 1)[0].decode('latin-1')
    else:
        path = scope['path']
    query = scope.get('query_string', b'').decode('latin-1')
    
    return CustomRequest(
        protocol=request.url.scheme,
        host=request.headers.get('host', ''),
        original_url=f"{path}?{query}" if query else path,
        method=request.method,
    )


def create_fastapi_verification_middleware(
    config: SignerConfig,
    on_invalid: Optional[Handler] = None,
    on_expired: Optional[Handler] = None,
    executor: Optional[Executor] = None
):
    """
    Create FastAPI verification middleware
    
    Register with `app.middleware("http")(middleware)`. Valid requests
    continue with the `signed` parameter removed from the query string;
    the verification result is stored on `request.state.signed_url`.
    
    Args:
        config: Signer configuration
        on_invalid: Optional handler returning a response for rejected URLs
        on_expired: Optional handler returning a response for expired URLs
        executor: Executor for the key derivation
        
    Returns:
        FastAPI middleware function
    """
    try:
        from fastapi.responses import JSONResponse  # type: ignore
    except ImportError:
        raise ImportError("FastAPI is required for FastAPI middleware")
    
    def reject(request: Any, result: VerificationResult) -> Any:
        error = create_rejection_error(result)
        return JSONResponse(
            {'error': error.message, 'code': error.error_code},
            status_code=error.status_code
        )
    
    on_invalid = on_invalid or reject
    on_expired = on_expired or reject
    
    async def fastapi_verification_middleware(request, call_next):
        custom_request = request_from_starlette(request)
        if custom_request.host:
            result = await verify_request_async(config, custom_request, executor)
        else:
            result = VerificationResult(VerificationStatus.MALFORMED, REQ_HOST_UNDEFINED)
        request.state.signed_url = result
        
        if not result.is_valid:
            logger.warning(f"Rejected signed URL request: {result.status.value}")
            handler = on_expired if result.status == VerificationStatus.EXPIRED else on_invalid
            response = handler(request, result)
            if asyncio.iscoroutine(response):
                response = await response
            return response
        
        stripped = strip_signed_param(custom_request.original_url)
        request.scope['query_string'] = stripped.partition('?')[2].encode('latin-1')
        return await call_next(request)
    
    return fastapi_verification_middleware
