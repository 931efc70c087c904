"""
Canonical URL construction for signed URLs

The canonical string is the exact text that gets hashed:
`<url><connector>signed=<encoded metadata>;`. The signature token is
appended directly after the terminator. The helpers that locate and split
the `signed` parameter on the verification side live here too, so both
directions share one definition of the layout.
"""

from typing import NamedTuple, Optional

from ..constants import (
    SIGNED_PARAM,
    SIGNATURE_TERMINATOR,
    URL_ADD_PARAMS_SYMBOL,
    URL_BEGIN_PARAMS_SYMBOL,
    URL_SEPARATOR,
    URL_PARAM_UNDEFINED,
    URL_IS_NOT_VALID,
)
from ..exceptions import InputError, ErrorCodes


class SignedUrlParts(NamedTuple):
    """A signed URL split at the signature boundary"""
    canonical: str
    encoded_metadata: str
    signature: str


def validate_base_url(url: str) -> None:
    """
    Validate a URL before it is signed.
    
    Raises:
        InputError: If the URL is empty, not a string or ends with '/'
    """
    if not isinstance(url, str) or not url:
        raise InputError(URL_PARAM_UNDEFINED, ErrorCodes.INVALID_URL, {"url": repr(url)})
    
    if url.endswith(URL_SEPARATOR):
        raise InputError(URL_IS_NOT_VALID, ErrorCodes.INVALID_URL, {"url": url})


def get_query_connector(url: str) -> str:
    """'?' when the URL has no query yet, '&' otherwise"""
    if URL_BEGIN_PARAMS_SYMBOL in url:
        return URL_ADD_PARAMS_SYMBOL
    return URL_BEGIN_PARAMS_SYMBOL


def canonicalize(base_url: str, encoded_metadata: str) -> str:
    """
    Build the canonical string that is signed.
    
    Args:
        base_url: URL to sign (must not end with '/')
        encoded_metadata: Output of encode_metadata
        
    Returns:
        str: Canonical string ending with the signature terminator
        
    Raises:
        InputError: If base_url is invalid
    """
    validate_base_url(base_url)
    connector = get_query_connector(base_url)
    return f"{base_url}{connector}{SIGNED_PARAM}{encoded_metadata}{SIGNATURE_TERMINATOR}"


def find_signed_param(url: str) -> int:
    """
    Position of the connector that starts the `signed` parameter.
    
    The last '&signed=' wins; '?signed=' is only used when there is none.
    
    Returns:
        int: Index of the '&' or '?' connector, -1 when absent
    """
    position = url.rfind(f"{URL_ADD_PARAMS_SYMBOL}{SIGNED_PARAM}")
    if position == -1:
        position = url.rfind(f"{URL_BEGIN_PARAMS_SYMBOL}{SIGNED_PARAM}")
    return position


def split_signed_url(url: str) -> Optional[SignedUrlParts]:
    """
    Split a signed URL into canonical candidate, metadata and signature.
    
    Args:
        url: Full incoming URL
        
    Returns:
        SignedUrlParts, or None when no well-formed `signed` parameter exists
    """
    position = find_signed_param(url)
    if position == -1:
        return None
    
    metadata_start = position + 1 + len(SIGNED_PARAM)
    terminator = url.rfind(SIGNATURE_TERMINATOR, metadata_start)
    if terminator == -1:
        return None
    
    boundary = terminator + len(SIGNATURE_TERMINATOR)
    return SignedUrlParts(
        canonical=url[:boundary],
        encoded_metadata=url[metadata_start:terminator],
        signature=url[boundary:],
    )


def strip_signed_param(url: str) -> str:
    """
    Remove the `signed` parameter (and everything after it) from a URL.
    
    URLs without the parameter are returned unchanged.
    """
    position = find_signed_param(url)
    if position == -1:
        return url
    return url[:position]
