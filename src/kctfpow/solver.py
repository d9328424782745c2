"""
Solver

solve(challenge) = encode(difficulty, sloth_root(seed, difficulty))

Pure and deterministic: the same challenge always yields the same
solution string.
"""

import logging
import time

from .codec import encode, encode_kctf_solution
from .types import ChallengeParams
from .work import work


logger = logging.getLogger(__name__)


def solve_payload(challenge: ChallengeParams) -> bytes:
    """Run the work function and return the minimal big-endian result."""
    start = time.perf_counter()
    payload = work(challenge.seed, challenge.difficulty)
    logger.debug(
        "solved difficulty %d in %.3fs",
        challenge.difficulty, time.perf_counter() - start,
    )
    return payload


def solve(challenge: ChallengeParams) -> str:
    """
    Solve a challenge and return the encoded solution.

    The solution reuses the challenge grammar with the result bytes in
    the seed slot: s.<difficulty>.<result>
    """
    return encode(challenge.difficulty, solve_payload(challenge))


def solve_kctf(challenge: ChallengeParams) -> str:
    """Solve a challenge and return the kCTF form s.<result>."""
    return encode_kctf_solution(solve_payload(challenge))
