"""Challenge-response password hashing used by the legacy login exchange."""

from __future__ import annotations

import hashlib

_MD5_SIZE = 16
_CHALLENGE_SIZE = _MD5_SIZE * 2
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _decode_hex(text: str, size: int) -> bytes:
    """Decode the first ``size`` bytes of a hexadecimal string."""
    if len(text) < size * 2:
        raise ValueError("Too short string")
    digits = text[: size * 2]
    if not _HEX_DIGITS.issuperset(digits):
        raise ValueError("Invalid hex string")
    return bytes.fromhex(digits)


def hash_password(plain: str | bytes, challenge: str) -> str:
    """Return the lower-case hex MD5 of a zero byte, the password and the challenge.

    The challenge is the 32 character hexadecimal string sent by the router.
    """
    if len(challenge) != _CHALLENGE_SIZE:
        raise ValueError("Invalid challenge size")

    challenge_bytes = _decode_hex(challenge, _MD5_SIZE)
    plain_bytes = plain.encode("utf-8") if isinstance(plain, str) else bytes(plain)

    digest = hashlib.md5(usedforsecurity=False)
    digest.update(b"\x00")
    digest.update(plain_bytes)
    digest.update(challenge_bytes)
    return digest.hexdigest()