"""
Digest and truncation helpers.

The simulation attacks a SHA-1 digest cut down to its last ``bits / 4`` hex
characters. Both functions are pure.
"""

import hashlib

from .config import validate_bits


def calculate_hash(data: bytes) -> str:
    """Return the lowercase hex SHA-1 digest of ``data``."""
    hash_obj = hashlib.sha1()
    hash_obj.update(data)
    return hash_obj.hexdigest()


def truncate_hash(full_hash: str, bits: int) -> str:
    """
    Keep the rightmost ``bits`` bits of a hex digest.

    Args:
        full_hash: Hex encoded digest
        bits: Number of bits to keep, a non-negative multiple of 4

    Returns:
        The trailing ``bits // 4`` hex characters, an empty string for
        ``bits == 0``, or the whole digest when it is shorter than requested.
    """
    validate_bits(bits)
    if bits == 0:
        return ""

    nibbles = bits // 4
    if len(full_hash) < nibbles:
        return full_hash
    return full_hash[-nibbles:]


def truncated_digest(data: bytes, bits: int) -> str:
    """Hash ``data`` and truncate the result to ``bits`` bits."""
    return truncate_hash(calculate_hash(data), bits)
