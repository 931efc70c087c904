"""
Test suite for signed URL generation

Covers the signer configuration, metadata codec, canonical URL helpers
and sign_url itself.
"""

import dataclasses

import pytest

from simple_sign_url.signing import (
    SignerConfig,
    SignedMetadata,
    HttpMethod,
    sign_url,
    sign_url_async,
    create_metadata,
    encode_metadata,
    decode_metadata,
    canonicalize,
    find_signed_param,
    split_signed_url,
    strip_signed_param,
    derive_signature,
    generate_nonce,
    generate_timestamp,
)
from simple_sign_url.constants import DEFAULT_TTL, DEFAULT_ALGORITHM, MAX_RANDOM_VALUE
from simple_sign_url.exceptions import ConfigError, InputError, ErrorCodes


class TestSigningUtilities:
    """Test utility functions"""
    
    def test_generate_nonce(self):
        """Nonces are ints in range and vary"""
        nonces = [generate_nonce() for _ in range(20)]
        
        assert all(isinstance(n, int) for n in nonces)
        assert all(0 <= n < MAX_RANDOM_VALUE for n in nonces)
        assert len(set(nonces)) > 1
    
    def test_generate_timestamp(self):
        """Timestamp is current Unix time"""
        import time
        assert abs(generate_timestamp() - time.time()) < 2


class TestSignerConfig:
    """Test signer configuration validation"""
    
    def test_defaults(self):
        """Test default ttl and algorithm"""
        config = SignerConfig(secret_key="s3cret")
        
        assert config.ttl == DEFAULT_TTL == 60
        assert config.algorithm == DEFAULT_ALGORITHM == "sha512"
    
    def test_bytes_secret(self):
        """Bytes secrets are accepted"""
        config = SignerConfig(secret_key=b"\x00\x01secret")
        assert config.secret_key == b"\x00\x01secret"
        assert sign_url(config, "http://h/x", "GET").startswith("http://h/x?signed=")
    
    @pytest.mark.parametrize("secret", [None, "", b""])
    def test_missing_secret(self, secret):
        """Missing secrets are rejected"""
        with pytest.raises(ConfigError) as exc_info:
            SignerConfig(secret_key=secret)
        assert exc_info.value.error_code == ErrorCodes.MISSING_SECRET
    
    def test_wrong_secret_type(self):
        """Non str/bytes secrets are rejected"""
        with pytest.raises(ConfigError) as exc_info:
            SignerConfig(secret_key=12345)
        assert exc_info.value.error_code == ErrorCodes.INVALID_SECRET
    
    @pytest.mark.parametrize("ttl", ["60", 0, -5, 1.5, True, None])
    def test_invalid_ttl(self, ttl):
        """TTL must be a positive int"""
        with pytest.raises(ConfigError) as exc_info:
            SignerConfig(secret_key="s3cret", ttl=ttl)
        assert exc_info.value.error_code == ErrorCodes.INVALID_TTL
    
    @pytest.mark.parametrize("algorithm", [512, None, ""])
    def test_invalid_algorithm_type(self, algorithm):
        """Algorithm must be a non-empty string"""
        with pytest.raises(ConfigError) as exc_info:
            SignerConfig(secret_key="s3cret", algorithm=algorithm)
        assert exc_info.value.error_code == ErrorCodes.INVALID_ALGORITHM
    
    def test_unsupported_algorithm(self):
        """Unknown algorithms fail at construction"""
        with pytest.raises(ConfigError) as exc_info:
            SignerConfig(secret_key="s3cret", algorithm="md5")
        assert exc_info.value.error_code == ErrorCodes.UNSUPPORTED_ALGORITHM
    
    def test_immutable(self):
        """Config cannot be changed after construction"""
        config = SignerConfig(secret_key="s3cret")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.ttl = 10
    
    def test_secret_not_in_repr(self):
        """The secret never shows up in repr"""
        assert "s3cret" not in repr(SignerConfig(secret_key="s3cret"))


class TestMetadataCodec:
    """Test encoding of the signed parameter value"""
    
    def test_encode(self):
        """Blob is fully percent-encoded"""
        metadata = SignedMetadata(expires_at=1700000060, method="get", nonce=42)
        
        assert encode_metadata(metadata) == "e%3A1700000060%3Bm%3AGET%3Br%3A42"
    
    def test_round_trip(self):
        """decode(encode(m)) == m"""
        metadata = SignedMetadata(expires_at=1700000060, method="DELETE", nonce=9876543210)
        assert decode_metadata(encode_metadata(metadata)) == metadata
    
    def test_decode_normalizes_method(self):
        """Method is upper-cased on decode"""
        metadata = decode_metadata("e%3A10%3Bm%3Apost%3Br%3A1")
        assert metadata.method == "POST"
    
    def test_nonce_is_opaque(self):
        """Non numeric nonces are kept as text"""
        metadata = decode_metadata("e%3A10%3Bm%3AGET%3Br%3Aabc")
        assert metadata.nonce == "abc"

    def test_non_ascii_digit_nonce(self):
        """Unicode digits such as superscripts stay text"""
        metadata = decode_metadata("e%3A10%3Bm%3AGET%3Br%3A%C2%B2")
        assert metadata.nonce == "²"

    @pytest.mark.parametrize("encoded", [
        "",
        None,
        "garbage",
        "e%3Aabc%3Bm%3AGET%3Br%3A1",        # non integer expiry
        "e%3A10%3Bm%3AGET",                 # missing nonce
        "e%3A10%3Bm%3AGET%3Br%3A1%3Bx%3A2", # extra key
        "e%3A10%3Be%3A11%3Bm%3AGET",        # duplicate key
        "e%3A10%3Bm%3A%3Br%3A1",            # empty method
        "e%3A10%3BmGET%3Br%3A1",            # missing separator
    ])
    def test_decode_malformed(self, encoded):
        """Malformed values decode to None instead of raising"""
        assert decode_metadata(encoded) is None


class TestCanonicalUrl:
    """Test canonical URL construction and parsing"""
    
    def test_canonicalize_without_query(self):
        """'?' starts the signed parameter"""
        assert canonicalize("http://h/x", "abc") == "http://h/x?signed=abc;"
    
    def test_canonicalize_with_query(self):
        """'&' appends to an existing query"""
        assert canonicalize("http://h/x?a=1", "abc") == "http://h/x?a=1&signed=abc;"
    
    def test_canonicalize_deterministic(self):
        """Same inputs, same output"""
        assert canonicalize("http://h/x", "abc") == canonicalize("http://h/x", "abc")
    
    @pytest.mark.parametrize("url", ["", None, 42, "http://h/x/"])
    def test_canonicalize_rejects_bad_url(self, url):
        """Empty, non-str and trailing slash URLs are rejected"""
        with pytest.raises(InputError) as exc_info:
            canonicalize(url, "abc")
        assert exc_info.value.error_code == ErrorCodes.INVALID_URL
    
    def test_find_signed_param(self):
        """Last '&signed=' wins, then '?signed='"""
        assert find_signed_param("http://h/x") == -1
        assert find_signed_param("http://h/x?signed=a;b") == 10
        assert find_signed_param("http://h/x?signed=a&signed=b;c") == 19
        assert find_signed_param("http://h/x?a=1&signed=b;c") == 14
    
    def test_split_signed_url(self):
        """Split at the terminator"""
        parts = split_signed_url("http://h/x?a=1&signed=abc;deadbeef")
        
        assert parts.canonical == "http://h/x?a=1&signed=abc;"
        assert parts.encoded_metadata == "abc"
        assert parts.signature == "deadbeef"
    
    def test_split_without_terminator(self):
        """No terminator after the parameter means no split"""
        assert split_signed_url("http://h/x?signed=abc") is None
        assert split_signed_url("http://h/x;y?signed=abc") is None
        assert split_signed_url("http://h/x") is None
    
    def test_strip_signed_param(self):
        """Stripping removes the parameter and the signature"""
        assert strip_signed_param("/x?signed=abc;def") == "/x"
        assert strip_signed_param("/x?a=1&signed=abc;def") == "/x?a=1"
        assert strip_signed_param("/x?a=1") == "/x?a=1"


class TestSignUrl:
    """Test sign_url"""
    
    def test_example_shape(self, config):
        """Signed URL is the canonical string plus a hex token"""
        signed = sign_url(config, "http://h/x", "GET")
        
        assert signed.startswith("http://h/x?signed=")
        canonical, _, token = signed.rpartition(";")
        assert len(token) == 64
        assert derive_signature(canonical + ";", "s3cret", "sha512") == token
    
    def test_metadata_contents(self, config, clock):
        """Expiry is now + ttl, method is upper-cased"""
        signed = sign_url(config, "http://h/x?a=1", "post")
        parts = split_signed_url(signed)
        metadata = decode_metadata(parts.encoded_metadata)
        
        assert "&signed=" in signed
        assert metadata.expires_at == int(clock.now) + 60
        assert metadata.method == "POST"
        assert isinstance(metadata.nonce, int)
    
    def test_expiry_rounds_up(self, clock):
        """Fractional clocks round up to the next second"""
        clock.now = 1000.2
        config = SignerConfig(secret_key="s3cret", ttl=5, timestamp_generator=clock)
        assert create_metadata(config, "GET").expires_at == 1006
    
    def test_nonce_varies_signature(self, config):
        """Identical calls yield different URLs"""
        assert sign_url(config, "http://h/x", "GET") != sign_url(config, "http://h/x", "GET")
    
    def test_fixed_nonce_is_deterministic(self, clock):
        """With a fixed clock and nonce the output is stable"""
        config = SignerConfig(secret_key="s3cret", timestamp_generator=clock, nonce_generator=lambda: 7)
        
        assert sign_url(config, "http://h/x", "GET") == sign_url(config, "http://h/x", "GET")
    
    def test_http_method_enum(self, config):
        """HttpMethod members are accepted"""
        signed = sign_url(config, "http://h/x", HttpMethod.PUT)
        assert decode_metadata(split_signed_url(signed).encoded_metadata).method == "PUT"
    
    @pytest.mark.parametrize("url", ["", None, "http://h/x/"])
    def test_invalid_url(self, config, url):
        """Bad URLs raise InputError"""
        with pytest.raises(InputError):
            sign_url(config, url, "GET")
    
    @pytest.mark.parametrize("method", ["", None, 5, "GET;x", "GET x", "GÉT"])
    def test_invalid_method(self, config, method):
        """Bad methods raise InputError"""
        with pytest.raises(InputError) as exc_info:
            sign_url(config, "http://h/x", method)
        assert exc_info.value.error_code == ErrorCodes.INVALID_METHOD
    
    @pytest.mark.asyncio
    async def test_sign_url_async(self, config):
        """Async variant produces a signed URL"""
        signed = await sign_url_async(config, "http://h/x", "GET")
        assert signed.startswith("http://h/x?signed=")
