"""
Sequential Work Function

The canonical computation ("sloth") that is:
- Deterministic
- Sequential (cannot be parallelized meaningfully)
- Cheap to invert

One round of the forward function:
1. Take the modular square root, x^(2^1277) mod M, i.e. 1277 squarings
2. Flip bit 0 (x XOR 1)

Each round MUST complete before the next can begin because:
- The square root exponent is applied to the previous round's output
- The XOR is not multiplicative, so rounds cannot be merged into a
  single exponentiation x^(2^(1277 * d))

The inverse round is (y XOR 1)^2 mod M: one squaring per round.
"""

from typing import Union

from .field import MersenneElement, MODULUS


def work_round(x: MersenneElement) -> MersenneElement:
    """
    Execute one round of the forward work function.

    x_{i+1} = sqrt(x_i) XOR 1
    """
    return x.sqrt().flip_low_bit()


def unwork_round(y: MersenneElement) -> MersenneElement:
    """
    Execute one round of the inverse function.

    y_{i-1} = (y_i XOR 1)^2

    Recovers the round input up to sign: returns x or M - x.
    """
    return y.flip_low_bit().square()


def sloth_root(x: Union[int, MersenneElement], difficulty: int) -> MersenneElement:
    """
    Run the forward work function for `difficulty` rounds.

    difficulty = 0 returns x reduced mod M.
    """
    if not isinstance(x, MersenneElement):
        x = MersenneElement(x)
    for _ in range(difficulty):
        x = work_round(x)
    return x


def sloth_square(y: Union[int, MersenneElement], difficulty: int) -> MersenneElement:
    """
    Run the inverse function for `difficulty` rounds.

    sloth_square(sloth_root(x, d), d) is x or M - x.
    """
    if not isinstance(y, MersenneElement):
        y = MersenneElement(y)
    for _ in range(difficulty):
        y = unwork_round(y)
    return y


def matches_up_to_sign(x: MersenneElement, y: MersenneElement) -> bool:
    """True iff y == x or y == M - x."""
    return y == x or y == -x


def work(seed: bytes, difficulty: int) -> bytes:
    """
    Compute the solution payload for a seed.

    Seed is read as a big-endian integer and reduced mod M; the result is
    the minimal big-endian encoding of the final value.
    """
    return sloth_root(MersenneElement.from_bytes(seed), difficulty).to_bytes()


__all__ = [
    "MODULUS",
    "work_round",
    "unwork_round",
    "sloth_root",
    "sloth_square",
    "matches_up_to_sign",
    "work",
]
