"""
Challenge Generator

generate(difficulty) = ChallengeParams(difficulty, urandom(16))
"""

import logging
import os

from .errors import EntropyUnavailableError
from .params import PowParams, DEFAULT_PARAMS, check_difficulty
from .types import ChallengeParams


logger = logging.getLogger(__name__)


def random_seed(size: int) -> bytes:
    """Draw `size` bytes from the OS CSPRNG."""
    try:
        return os.urandom(size)
    except (NotImplementedError, OSError) as e:
        raise EntropyUnavailableError("secure random source unavailable") from e


def generate(difficulty: int, params: PowParams = DEFAULT_PARAMS) -> ChallengeParams:
    """Generate a fresh random challenge of the given difficulty."""
    check_difficulty(difficulty)
    challenge = ChallengeParams(difficulty=difficulty, seed=random_seed(params.seed_bytes))
    logger.debug("generated challenge with difficulty %d", difficulty)
    return challenge
