"""
Credential redaction for logs.

Attached to every handler by logging_config.setup_logging().
"""

import logging
import re
from typing import Any, Callable, List, Tuple, Union

Replacement = Union[str, Callable[["re.Match[str]"], str]]


def _truncate(match: "re.Match[str]") -> str:
    return match.group(0)[:8] + "...[REDACTED]"


class CredentialRedactionFilter(logging.Filter):
    """
    Rewrites log records so credentials never reach a handler.

    Redacted, in order:
    - Stark/Ethereum private keys (0x + 64 hex chars)
    - Values after secret/passphrase/password/signature (name=value, name: value)
    - Any remaining mixed-case base64 token of 40+ chars (API secrets, HMAC
      signatures); request paths and hex ids are left alone

    Example:
        >>> handler = logging.StreamHandler()
        >>> handler.addFilter(CredentialRedactionFilter())
    """

    REDACTIONS: List[Tuple["re.Pattern[str]", Replacement]] = [
        (re.compile(r"0x[0-9a-fA-F]{64}"), "0x[REDACTED]"),
        # Keep the name (secret=) and replace only the value
        (
            re.compile(
                r"((?:secret|passphrase|password|signature)[\"']?\s*[:=]\s*[\"']?)"
                r"[A-Za-z0-9+/=_\-]{8,}[\"']?",
                re.IGNORECASE,
            ),
            r"\1[REDACTED]",
        ),
        # Whole runs only, never starting with "/" (request paths), and mixing
        # digits with both letter cases the way random key material does
        (
            re.compile(
                r"(?<![A-Za-z0-9+/_\-])(?!/)"
                r"(?=[A-Za-z0-9+/_\-]*[0-9])"
                r"(?=[A-Za-z0-9+/_\-]*[A-Z])"
                r"(?=[A-Za-z0-9+/_\-]*[a-z])"
                r"[A-Za-z0-9+/_\-]{40,}={0,2}"
            ),
            _truncate,
        ),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Sanitize msg, string args and cached traceback text. Never drops a record."""
        if record.msg:
            record.msg = self.redact(str(record.msg))

        if isinstance(record.args, dict):
            record.args = {k: self._redact_arg(v) for k, v in record.args.items()}
        elif isinstance(record.args, tuple):
            record.args = tuple(self._redact_arg(arg) for arg in record.args)

        if record.exc_text:
            record.exc_text = self.redact(record.exc_text)
        return True

    def _redact_arg(self, arg: Any) -> Any:
        # Non-strings keep their type so %d / %f formatting still works
        return self.redact(arg) if isinstance(arg, str) else arg

    def redact(self, text: str) -> str:
        for pattern, replacement in self.REDACTIONS:
            text = pattern.sub(replacement, text)
        return text
