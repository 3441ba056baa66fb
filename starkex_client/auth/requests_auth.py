"""
`requests` integration.

Lets a caller-owned requests.Session sign private calls:

    session.auth = StarkexRequestAuth(authenticator)
    session.post(f"{host}/v3/orders", json=body)
"""

import logging

from requests.auth import AuthBase

from .authenticator import RequestAuthenticator
from .canonical_json import canonicalize_body

logger = logging.getLogger(__name__)


class StarkexRequestAuth(AuthBase):
    """Attach SIGNATURE/API-KEY/TIMESTAMP/PASSPHRASE headers to a prepared request."""

    def __init__(self, authenticator: RequestAuthenticator, header_prefix: str = ""):
        self.authenticator = authenticator
        self.header_prefix = header_prefix

    def __call__(self, r):
        body = r.body
        if body:
            # Send exactly the bytes that were signed
            canonical = canonicalize_body(body).encode("utf-8")
            r.body = canonical
            r.headers["Content-Length"] = str(len(canonical))
            body = canonical

        headers = self.authenticator.build_headers(r.method, r.path_url, body)
        r.headers.update(headers.to_http(self.header_prefix))
        return r
