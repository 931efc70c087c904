"""
Example usage of simple-sign-url

This example signs a download link, verifies it in the states a server
can see, and runs it through the synchronous and asynchronous middleware.
"""

import asyncio
import time

from simple_sign_url import (
    SignerConfig,
    CustomRequest,
    SignedUrlHttpError,
    sign_url,
    sign_url_async,
    verify_url,
    create_verifier,
    create_async_verifier,
)
from simple_sign_url.signing import strip_signed_param


def basic_example():
    """Sign and verify a URL"""
    print("=== Basic signing ===")
    
    config = SignerConfig(secret_key="s3cret", ttl=60)
    signed = sign_url(config, "http://example.com/files/report", "GET")
    print(f"Signed URL: {signed}")
    
    for method in ("GET", "POST"):
        result = verify_url(config, signed, method)
        print(f"  {method}: {result.status.value}")
    
    tampered = signed.replace("/report", "/secrets")
    print(f"  tampered: {verify_url(config, tampered, 'GET').status.value}")
    print(f"  unsigned: {verify_url(config, strip_signed_param(signed), 'GET').status.value}")
    print()


def expiry_example():
    """Show expiry with an injected clock"""
    print("=== Expiry ===")
    
    now = [time.time()]
    config = SignerConfig(secret_key="s3cret", ttl=1, timestamp_generator=lambda: now[0])
    signed = sign_url(config, "http://example.com/files/report", "GET")
    
    print(f"  immediately: {verify_url(config, signed, 'GET').status.value}")
    now[0] += 2
    print(f"  two seconds later: {verify_url(config, signed, 'GET').status.value}")
    print()


def middleware_example():
    """Run requests through the synchronous middleware"""
    print("=== Middleware ===")
    
    config = SignerConfig(secret_key="s3cret")
    verifier = create_verifier(config)
    signed = sign_url(config, "http://example.com/files/report?id=7", "GET")
    path = signed[len("http://example.com"):]
    
    request = CustomRequest(protocol="http", host="example.com", original_url=path, method="GET")
    print(verifier(request, lambda req: f"  handled {req.original_url}"))
    
    request = CustomRequest(protocol="http", host="example.com", original_url=path, method="DELETE")
    try:
        verifier(request, lambda req: "unreachable")
    except SignedUrlHttpError as e:
        print(f"  rejected with {e.status_code}: {e.message}")
    print()


async def async_example():
    """Sign and verify without blocking the event loop"""
    print("=== Async middleware ===")
    
    config = SignerConfig(secret_key="s3cret")
    signed = await sign_url_async(config, "http://example.com/files/report", "GET")
    
    async def call_next(request):
        return f"  handled {request.original_url}"
    
    request = CustomRequest(
        protocol="http",
        host="example.com",
        original_url=signed[len("http://example.com"):],
        method="GET",
    )
    print(await create_async_verifier(config)(request, call_next))
    print()


def main():
    """Run all examples"""
    print("simple-sign-url examples")
    print("=" * 40)
    print()
    
    basic_example()
    expiry_example()
    middleware_example()
    asyncio.run(async_example())
    
    print("All examples completed!")


if __name__ == '__main__':
    main()
