"""
Shared constants for signed URL generation and verification

Parameter names, separators and error messages used by both the signing
and the verification side. Canonicalization and parsing read their symbols
from here so the two directions cannot drift apart.
"""

# Defaults
DEFAULT_ALGORITHM = "sha512"
DEFAULT_TTL = 60

# Key derivation
ITERATION_COUNT = 10000
HASH_LENGTH = 32

# Nonce range: [0, MAX_RANDOM_VALUE)
MAX_RANDOM_VALUE = 10_000_000_000

# URL layout
SIGNED_PARAM_NAME = "signed"
SIGNED_PARAM = f"{SIGNED_PARAM_NAME}="
URL_SEPARATOR = "/"
URL_BEGIN_PARAMS_SYMBOL = "?"
URL_ADD_PARAMS_SYMBOL = "&"
SIGNATURE_TERMINATOR = ";"

# Metadata blob (before percent-encoding)
METADATA_SEP = ";"
METADATA_EQ = ":"
METADATA_EXPIRES_KEY = "e"
METADATA_METHOD_KEY = "m"
METADATA_NONCE_KEY = "r"

# Request extraction
URL_HOST_PARAM_NAME = "host"

# HTTP status codes used by the default middleware handlers
HTTP_BAD_REQUEST = 400
HTTP_FORBIDDEN = 403
HTTP_EXPIRED = 410

# Error messages
SECRET_KEY_UNDEFINED = "Secret key is required"
SECRET_KEY_WRONG_TYPE = "Secret key must be a string or bytes"
TTL_WRONG_TYPE = "Wrong type of TTL parameter, it should be a positive integer"
ALGORITHM_WRONG_TYPE = "Wrong type of Algorithm parameter, it should be a string"
ALGORITHM_UNSUPPORTED = "Unsupported hashing algorithm"
URL_PARAM_UNDEFINED = 'Parameter "url" is not defined or has wrong type'
HTTP_METHOD_PARAM_UNDEFINED = 'Parameter "http_method" is not defined or has wrong type'
URL_IS_NOT_VALID = "URL must not end with /"
REQ_UNDEFINED = 'Parameter "request" is not defined'
REQ_PROTOCOL_UNDEFINED = '"request.protocol" is not defined or has wrong type'
REQ_HOST_UNDEFINED = '"request.host" is not defined or has wrong type'
REQ_METHOD_UNDEFINED = '"request.method" is not defined or has wrong type'
REQ_ORIGINAL_URL_UNDEFINED = '"request.original_url" is not defined or has wrong type'
SIGNED_PARAM_UNDEFINED = "Signed parameter is not defined"
SIGNED_PARAM_MALFORMED = "Signed parameter is malformed"
URL_SIGNATURE_IS_NOT_VALID = "URL signature is not valid"
HTTP_METHOD_NOT_ALLOWED = "HTTP method does not match the signed URL"
SIGNED_URL_EXPIRED = "Signed URL expired"
