"""
kctfpow: kCTF Proof of Work

A sloth-style sequential proof of work over the Mersenne prime 2^1279 - 1:
- Challenges are (difficulty, seed) pairs encoded as s.<difficulty>.<seed>
- Solving takes `difficulty` sequential modular square roots
- Checking recomputes the solution and compares bytes

Usage:
    from kctfpow import decode_challenge, solve, check, generate

    # Solve a challenge
    chall = decode_challenge("s.AAAAMg==.H+fPiuL32DPbfN97cpd0nA==")
    print(solve(chall))

    # Check a solution
    check(chall, solution)          # True / False
    check(chall, "s.asdf")          # raises MalformedChallengeError

    # Generate a random challenge of difficulty 50
    print(generate(50))
"""

# Types
from .types import ChallengeParams

# Configuration
from .params import PowParams, DEFAULT_PARAMS, MAX_DIFFICULTY

# Errors
from .errors import PowError, MalformedChallengeError, EntropyUnavailableError

# Codec
from .codec import (
    encode,
    decode,
    decode_challenge,
    encode_kctf_solution,
    decode_kctf_solution,
)

# Work function
from .field import MersenneElement, MODULUS
from .work import sloth_root, sloth_square

# Main API
from .solver import solve, solve_payload, solve_kctf
from .verifier import check, check_kctf
from .generator import generate

__version__ = "2.1.0"

__all__ = [
    # Version
    "__version__",
    # Types
    "ChallengeParams",
    # Configuration
    "PowParams",
    "DEFAULT_PARAMS",
    "MAX_DIFFICULTY",
    # Errors
    "PowError",
    "MalformedChallengeError",
    "EntropyUnavailableError",
    # Codec
    "encode",
    "decode",
    "decode_challenge",
    "encode_kctf_solution",
    "decode_kctf_solution",
    # Work function
    "MersenneElement",
    "MODULUS",
    "sloth_root",
    "sloth_square",
    # Main API
    "solve",
    "solve_payload",
    "solve_kctf",
    "check",
    "check_kctf",
    "generate",
]
