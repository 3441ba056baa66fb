"""Request authentication for the exchange REST API."""

from .authenticator import RequestAuthenticator, decode_secret, format_timestamp
from .canonical_json import canonicalize_body, strip_nulls
from .requests_auth import StarkexRequestAuth

__all__ = [
    "RequestAuthenticator",
    "StarkexRequestAuth",
    "canonicalize_body",
    "strip_nulls",
    "decode_secret",
    "format_timestamp",
]
