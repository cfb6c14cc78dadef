"""Unpadded URL-safe Base64 (RFC 4648 section 5) used by every JWT segment."""

import base64
import binascii
import re

_URLSAFE_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def encode(data: bytes) -> str:
    """Encode bytes as base64url without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode(value: str) -> bytes:
    """Decode an unpadded base64url string.

    Raises ``ValueError`` when the input contains characters outside the
    URL-safe alphabet, has a length no padding can repair, or is not the
    canonical encoding of its bytes.
    """
    if _URLSAFE_ALPHABET.fullmatch(value) is None:
        raise ValueError("Input contains characters outside the base64url alphabet")
    remainder = len(value) % 4
    padding = "=" * (4 - remainder) if remainder else ""
    try:
        decoded = base64.urlsafe_b64decode(value + padding)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64url input: {exc}") from exc
    if encode(decoded) != value:
        raise ValueError("Input has non-zero trailing bits")
    return decoded
