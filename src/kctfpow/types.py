"""
Challenge Parameters

ChallengeParams = (difficulty, seed)

A challenge is value data: it is created by decoding a string or by the
generator, read by the solver and the verifier, and never mutated.
"""

from __future__ import annotations
from dataclasses import dataclass

from .params import PowParams, DEFAULT_PARAMS, check_difficulty


@dataclass(frozen=True)
class ChallengeParams:
    """
    The parameters for a proof-of-work challenge.

    str(challenge) is the wire encoding, s.<difficulty>.<seed>.
    """

    difficulty: int
    """Number of sequential rounds (unsigned 32-bit)."""

    seed: bytes
    """Big-endian starting value, exactly as it appeared on the wire."""

    def __post_init__(self):
        """Validate challenge."""
        check_difficulty(self.difficulty)
        if not isinstance(self.seed, bytes):
            raise TypeError(f"seed must be bytes, got {type(self.seed).__name__}")

    @property
    def value(self) -> int:
        """Seed interpreted as a non-negative big-endian integer."""
        return int.from_bytes(self.seed, 'big')

    def __str__(self) -> str:
        from .codec import encode
        return encode(self.difficulty, self.seed)

    # =========================================================================
    # Convenience API
    # =========================================================================

    @classmethod
    def decode(cls, text: str) -> ChallengeParams:
        """Decode a challenge string. Raises MalformedChallengeError."""
        from .codec import decode_challenge
        return decode_challenge(text)

    @classmethod
    def generate(cls, difficulty: int, params: PowParams = DEFAULT_PARAMS) -> ChallengeParams:
        """Generate a random challenge of the given difficulty."""
        from .generator import generate
        return generate(difficulty, params)

    def solve(self) -> str:
        """Solve this challenge and return the encoded solution."""
        from .solver import solve
        return solve(self)

    def check(self, solution: str) -> bool:
        """Check an encoded solution against this challenge."""
        from .verifier import check
        return check(self, solution)
