"""
Public Parameters for the Proof of Work

PowParams carries the tunable knobs of the kCTF scheme. The modulus and
the per-round transform are not tunable; they live in field.py and
work.py and are PINNED - changing them breaks compatibility with
deployed issuers and solvers.
"""

from dataclasses import dataclass

from .field import MERSENNE_EXPONENT


# Literal tag in the first field of every encoded string
VERSION = 's'

# Width of the big-endian difficulty field
DIFFICULTY_BYTES = 4

# Largest difficulty the difficulty field can carry
MAX_DIFFICULTY = (1 << (8 * DIFFICULTY_BYTES)) - 1

# Sequential squarings per difficulty unit: one square root, 2^1277
SQUARINGS_PER_ROUND = MERSENNE_EXPONENT - 2


@dataclass(frozen=True)
class PowParams:
    """
    Parameters for issuing challenges.

    All parameters are immutable and hashable.
    """

    seed_bytes: int = 16
    """Number of random bytes in a freshly generated seed."""

    default_difficulty: int = 100
    """Difficulty used by tooling when none is given."""

    def __post_init__(self):
        """Validate parameters."""
        if self.seed_bytes <= 0:
            raise ValueError(f"seed_bytes must be positive, got {self.seed_bytes}")
        if not 0 <= self.default_difficulty <= MAX_DIFFICULTY:
            raise ValueError(
                f"default_difficulty must be in [0, {MAX_DIFFICULTY}], "
                f"got {self.default_difficulty}"
            )


DEFAULT_PARAMS = PowParams()


def check_difficulty(difficulty: int) -> int:
    """Validate a difficulty fits the 4-byte wire field and return it."""
    if isinstance(difficulty, bool) or not isinstance(difficulty, int):
        raise TypeError(f"difficulty must be an int, got {type(difficulty).__name__}")
    if not 0 <= difficulty <= MAX_DIFFICULTY:
        raise ValueError(f"difficulty must be in [0, {MAX_DIFFICULTY}], got {difficulty}")
    return difficulty
