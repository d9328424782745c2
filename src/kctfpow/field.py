"""
Mersenne Prime Field Arithmetic

Field: Z/MZ where M = 2^1279 - 1

This prime has special structure enabling:
- Fast modular reduction (fold the high bits back onto the low bits)
- Cheap square roots: M ≡ 3 (mod 4), so sqrt(a) = a^((M+1)/4) = a^(2^1277)

Values are backed by gmpy2.mpz so that the 1279-bit squarings run in GMP.
"""

from __future__ import annotations
from typing import Union

import gmpy2
from gmpy2 import mpz


# Mersenne exponent: M = 2^MERSENNE_EXPONENT - 1
MERSENNE_EXPONENT = 1279

# The modulus
MODULUS = (mpz(1) << MERSENNE_EXPONENT) - 1

# (M + 1) / 4 = 2^1277, the principal square root exponent
SQRT_EXPONENT = (MODULUS + 1) >> 2


def _fold(n: mpz) -> mpz:
    """
    Reduce a non-negative integer below 2^2558 modulo M.

    2^1279 ≡ 1 (mod M), so n = hi * 2^1279 + lo ≡ hi + lo.
    """
    n = (n & MODULUS) + (n >> MERSENNE_EXPONENT)
    if n >= MODULUS:
        n -= MODULUS
    return n


class MersenneElement:
    """
    Element of Z/MZ for the Mersenne prime M = 2^1279 - 1.

    The stored value is always fully reduced into [0, M).
    """

    __slots__ = ('value',)

    def __init__(self, value: Union[int, mpz]):
        """Create element from integer (reduces mod M)."""
        self.value = mpz(value) % MODULUS

    # =========================================================================
    # Arithmetic Operations
    # =========================================================================

    def __mul__(self, other: MersenneElement) -> MersenneElement:
        """Multiplication in Z/MZ."""
        return MersenneElement(_fold(self.value * other.value))

    def __neg__(self) -> MersenneElement:
        """Negation in Z/MZ."""
        return MersenneElement(MODULUS - self.value if self.value else 0)

    def square(self) -> MersenneElement:
        """Single modular squaring using Mersenne folding."""
        return MersenneElement(_fold(self.value * self.value))

    def sqrt(self) -> MersenneElement:
        """
        Principal square root candidate a^((M+1)/4).

        Equivalent to 1277 sequential squarings. For a quadratic
        non-residue this returns the root of -a instead.
        """
        return MersenneElement(gmpy2.powmod(self.value, SQRT_EXPONENT, MODULUS))

    def flip_low_bit(self) -> MersenneElement:
        """XOR with 1, reduced back into [0, M)."""
        return MersenneElement(self.value.bit_flip(0))

    # =========================================================================
    # Comparison Operations
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MersenneElement):
            return self.value == other.value
        if isinstance(other, (int, type(MODULUS))):
            return self.value == (other % MODULUS)
        return False

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"MersenneElement({hex(self.value)})"

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_bytes(self) -> bytes:
        """Minimal big-endian bytes (empty for zero)."""
        value = int(self.value)
        return value.to_bytes((value.bit_length() + 7) // 8, 'big')

    @classmethod
    def from_bytes(cls, data: bytes) -> MersenneElement:
        """Big-endian bytes of any length, reduced mod M."""
        return cls(int.from_bytes(data, 'big'))

    def to_int(self) -> int:
        """Convert to a plain Python integer."""
        return int(self.value)
