"""
Verifier

check(challenge, solution):
1. Decode the claimed solution (MalformedChallengeError if it fails)
2. Recompute the solution payload from the challenge
3. Compare payloads byte-for-byte

Malformed and incorrect stay distinguishable: the first raises, the
second returns False.

check_kctf accepts the two-field form produced by deployed kCTF solvers
and verifies it by unwinding, at one squaring per round.
"""

from .codec import decode, decode_kctf_solution
from .field import MersenneElement
from .solver import solve_payload
from .types import ChallengeParams
from .work import sloth_square, matches_up_to_sign


def check(challenge: ChallengeParams, solution: str) -> bool:
    """
    Check an encoded solution against a challenge.

    Costs as much as solving. A payload with extra leading zero bytes is
    incorrect even though it is numerically equal.
    """
    _, claimed = decode(solution)
    return claimed == solve_payload(challenge)


def check_kctf(challenge: ChallengeParams, solution: str) -> bool:
    """
    Check a kCTF solution, s.<result>, against a challenge.

    Accepts when unwinding the result yields the seed or its negation.
    """
    claimed = MersenneElement.from_bytes(decode_kctf_solution(solution))
    unwound = sloth_square(claimed, challenge.difficulty)
    return matches_up_to_sign(MersenneElement(challenge.value), unwound)
