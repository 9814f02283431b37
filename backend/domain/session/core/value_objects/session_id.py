"""SessionId value object.

Opaque bearer token: 32 bytes (256 bits) from the OS CSPRNG, encoded
as padded URL-safe base64 (44 characters).
"""

import base64
import binascii
import re
import secrets
from dataclasses import dataclass, field

from domain.shared.errors import InvalidSessionIdError, SessionIdGenerationFailedError

SESSION_ID_BYTES = 32

_URLSAFE_B64_PATTERN = re.compile(r"^[A-Za-z0-9_-]+={0,2}$")


@dataclass(frozen=True)
class SessionId:
    """Random session token.

    Examples:
        >>> session_id = SessionId.generate()
        >>> SessionId.parse(session_id.value) == session_id
        True
        >>> SessionId.parse("c2hvcnQ=")
        Traceback (most recent call last):
        ...
        InvalidSessionIdError: invalid session id
    """

    value: str = field(repr=False)

    @classmethod
    def generate(cls) -> "SessionId":
        """Create a fresh token.

        Raises:
            SessionIdGenerationFailedError: If the OS random source fails.
        """
        try:
            raw = secrets.token_bytes(SESSION_ID_BYTES)
        except OSError as e:
            raise SessionIdGenerationFailedError() from e
        return cls(base64.urlsafe_b64encode(raw).decode("ascii"))

    @classmethod
    def parse(cls, raw: str) -> "SessionId":
        """Validate a token read from a cookie or from storage.

        Raises:
            InvalidSessionIdError: If ``raw`` is not padded URL-safe
                base64 of exactly 32 bytes.
        """
        if not raw or len(raw) % 4 != 0 or not _URLSAFE_B64_PATTERN.match(raw):
            raise InvalidSessionIdError()
        try:
            decoded = base64.urlsafe_b64decode(raw)
        except (binascii.Error, ValueError) as e:
            raise InvalidSessionIdError() from e
        if len(decoded) != SESSION_ID_BYTES:
            raise InvalidSessionIdError()
        return cls(raw)

    def __str__(self) -> str:
        return self.value
