"""
Challenge/Solution Codec

Wire format (challenges and solutions alike):

    s.<base64(4-byte big-endian difficulty)>.<base64(seed-or-result bytes)>

Properties:
1. Round trip: decode(encode(d, b)) == (d, b)
2. Strict: any deviation raises MalformedChallengeError, never partial data
3. Standard base64 alphabet with '=' padding (not URL-safe)

The deployed kCTF solvers emit a shorter solution form, s.<base64(result)>,
handled by encode_kctf_solution / decode_kctf_solution.
"""

from __future__ import annotations
import base64
from typing import List, Tuple

from .errors import MalformedChallengeError
from .params import VERSION, DIFFICULTY_BYTES, check_difficulty
from .types import ChallengeParams


SEPARATOR = '.'


# =============================================================================
# FIELD HELPERS
# =============================================================================

def _b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode('ascii')


def _b64decode(field: str) -> bytes:
    try:
        data = base64.b64decode(field, validate=True)
    except ValueError as e:
        # binascii.Error for bad alphabet/padding, plain ValueError for non-ASCII
        raise MalformedChallengeError("parts aren't valid base64") from e
    # Only the canonical spelling is valid: no stray bits in the last symbol
    if _b64encode(data) != field:
        raise MalformedChallengeError("parts aren't valid base64")
    return data


def _split(text: str, expected_parts: int) -> List[str]:
    """Split on '.', check the version tag and the number of fields."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    parts = text.split(SEPARATOR)
    if parts[0] != VERSION:
        raise MalformedChallengeError("incorrect version")
    if len(parts) != expected_parts:
        raise MalformedChallengeError("incorrect number of parts")
    return parts


# =============================================================================
# THREE-FIELD FORMAT
# =============================================================================

def encode(difficulty: int, payload: bytes) -> str:
    """
    Encode a difficulty and a payload.

    Total for every 32-bit unsigned difficulty and every byte string.
    """
    check_difficulty(difficulty)
    return SEPARATOR.join([
        VERSION,
        _b64encode(difficulty.to_bytes(DIFFICULTY_BYTES, 'big')),
        _b64encode(bytes(payload)),
    ])


def decode(text: str) -> Tuple[int, bytes]:
    """
    Decode a three-field string into (difficulty, payload).

    Raises MalformedChallengeError on:
    - wrong or missing version tag
    - field count other than three
    - invalid base64 in either field
    - difficulty field not decoding to exactly 4 bytes
    """
    _, difficulty_field, payload_field = _split(text, 3)
    difficulty_bytes = _b64decode(difficulty_field)
    payload = _b64decode(payload_field)
    if len(difficulty_bytes) != DIFFICULTY_BYTES:
        raise MalformedChallengeError(
            f"difficulty must be {DIFFICULTY_BYTES} bytes, got {len(difficulty_bytes)}"
        )
    return int.from_bytes(difficulty_bytes, 'big'), payload


def decode_challenge(text: str) -> ChallengeParams:
    """Decode a challenge string into ChallengeParams."""
    difficulty, seed = decode(text)
    return ChallengeParams(difficulty=difficulty, seed=seed)


# =============================================================================
# kCTF SOLUTION FORMAT
# =============================================================================

def encode_kctf_solution(payload: bytes) -> str:
    """Encode a result as s.<base64(result)>."""
    return SEPARATOR.join([VERSION, _b64encode(bytes(payload))])


def decode_kctf_solution(text: str) -> bytes:
    """Decode s.<base64(result)> into the result bytes."""
    _, payload_field = _split(text, 2)
    return _b64decode(payload_field)
