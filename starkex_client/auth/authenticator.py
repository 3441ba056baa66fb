"""
HMAC request authentication for the exchange REST API.

Every private REST call carries four headers: SIGNATURE, API-KEY, TIMESTAMP
and PASSPHRASE. The signature is

    base64url(HMAC-SHA256(base64url_decode(secret),
                          timestamp + METHOD + path + canonical_body))

where path includes the query string sent on the wire and canonical_body is
the null-stripped compact JSON body (empty when there is none).
"""

import base64
import binascii
import hashlib
import hmac
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from ..exceptions import InvalidCredentialsError
from ..metrics import Metrics
from ..models import Credentials, RequestSignatureHeaders
from .canonical_json import Body, canonicalize_body

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """RFC 3339 UTC timestamp with second precision, e.g. 2024-01-01T12:00:00Z."""
    if moment.tzinfo is None:
        raise ValueError("timestamp must be timezone-aware")
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def decode_secret(secret: str) -> bytes:
    """
    Decode a base64 API secret into raw HMAC key bytes.

    Accepts the URL-safe and the standard alphabet. Padding is required.

    Raises:
        InvalidCredentialsError: If the secret is not valid base64
    """
    try:
        key = base64.b64decode(secret.encode("ascii"), altchars=b"-_", validate=True)
    except (binascii.Error, UnicodeEncodeError, ValueError):
        # SECURITY: Never echo the secret
        raise InvalidCredentialsError("API secret is not valid base64") from None

    if not key:
        raise InvalidCredentialsError("API secret decodes to an empty key")
    return key


class RequestAuthenticator:
    """
    Produces authentication headers for private REST requests.

    Holds one immutable credential set. Safe to share across threads: signing
    reads the credentials and touches no other state.
    """

    def __init__(
        self,
        credentials: Credentials,
        clock: Optional[Clock] = None,
        metrics: Optional[Metrics] = None
    ):
        """
        Initialize authenticator.

        Args:
            credentials: API key, passphrase and base64 secret
            clock: Source of the current UTC time (tests only)
            metrics: Optional metrics collector

        Raises:
            InvalidCredentialsError: If the secret is not valid base64
        """
        self._credentials = credentials
        self._key = decode_secret(credentials.secret)
        self._clock = clock or _utc_now
        self._metrics = metrics

    @classmethod
    def from_settings(cls, settings, **kwargs) -> "RequestAuthenticator":
        """Build from StarkexSettings (api_key, api_passphrase, api_secret)."""
        credentials = Credentials(
            api_key=settings.api_key or "",
            passphrase=settings.api_passphrase or "",
            secret=settings.api_secret or "",
        )
        return cls(credentials, **kwargs)

    @property
    def api_key(self) -> str:
        return self._credentials.api_key

    def __repr__(self) -> str:
        """Safe repr without sensitive data."""
        return f"RequestAuthenticator(api_key={self._credentials.api_key})"

    def sign(self, method: str, path: str, timestamp: str, body: Body = None) -> str:
        """
        Compute the request signature.

        Args:
            method: HTTP method (upper-cased before signing)
            path: Request path including the query string, e.g. /v3/orders?market=BTC-USD
            timestamp: RFC 3339 timestamp sent in the TIMESTAMP header
            body: Request body (JSON bytes/str or mapping), None for no body

        Returns:
            URL-safe base64 HMAC-SHA256 signature

        Raises:
            UnserializablePayloadError: If body is not a JSON object
        """
        message = timestamp + method.upper() + path + canonicalize_body(body)

        digest = hmac.new(self._key, message.encode("utf-8"), hashlib.sha256).digest()
        return base64.urlsafe_b64encode(digest).decode("utf-8")

    def build_headers(self, method: str, path: str, body: Body = None) -> RequestSignatureHeaders:
        """
        Create authentication headers for one request, timestamped now.

        Args:
            method: HTTP method
            path: Request path including the query string
            body: Request body

        Returns:
            RequestSignatureHeaders
        """
        timestamp = format_timestamp(self._clock())
        try:
            signature = self.sign(method, path, timestamp, body)
        except Exception as e:
            if self._metrics:
                self._metrics.track_failure("request", type(e).__name__)
            logger.error(f"Failed to sign {method.upper()} {path}: {type(e).__name__}")
            raise

        if self._metrics:
            self._metrics.track_request_signed(method.upper())
        logger.debug(f"Signed {method.upper()} {path} at {timestamp}")

        return RequestSignatureHeaders(
            signature=signature,
            api_key=self._credentials.api_key,
            timestamp=timestamp,
            passphrase=self._credentials.passphrase,
        )

    def verify(self, signature: str, method: str, path: str, timestamp: str, body: Body = None) -> bool:
        """
        Verify a request signature in constant time.

        Returns:
            True if signature matches
        """
        expected = self.sign(method, path, timestamp, body)
        return hmac.compare_digest(signature.encode("utf-8"), expected.encode("utf-8"))
