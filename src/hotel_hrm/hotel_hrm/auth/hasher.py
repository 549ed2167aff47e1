"""Password hashing.

Two digest shapes are understood:

* Werkzeug's salted KDF strings (``scrypt:...$salt$hash``), produced by
  :func:`werkzeug.security.generate_password_hash`. This is the default.
* Legacy unsalted digests: SHA-256 over the UTF-8 bytes, base64-encoded.
  Still accepted by :meth:`PasswordHasher.verify` so older user stores keep
  working; never produced unless explicitly configured.
"""
from __future__ import annotations

import base64
import hashlib
import hmac

from werkzeug.security import check_password_hash, generate_password_hash

LEGACY_METHOD = "sha256-base64"
DEFAULT_METHOD = "scrypt"


def legacy_digest(plaintext: str) -> str:
    """Deterministic SHA-256/base64 digest of ``plaintext``."""
    return base64.b64encode(hashlib.sha256(plaintext.encode("utf-8")).digest()).decode("ascii")


def is_legacy_digest(digest: str) -> bool:
    # Werkzeug digests always contain "$" separators, base64 never does.
    return "$" not in digest


class PasswordHasher:
    def __init__(self, method: str = DEFAULT_METHOD):
        self._method = method

    @property
    def method(self) -> str:
        return self._method

    def hash(self, plaintext: str) -> str:
        if self._method == LEGACY_METHOD:
            return legacy_digest(plaintext)
        return generate_password_hash(plaintext, method=self._method)

    def verify(self, plaintext: str, digest: str) -> bool:
        if not digest:
            return False
        try:
            if is_legacy_digest(digest):
                return hmac.compare_digest(legacy_digest(plaintext), digest)
            return check_password_hash(digest, plaintext)
        except (ValueError, TypeError):
            # placeholder hashes like "CHANGE_ME", unknown methods, non-ASCII digests
            return False
