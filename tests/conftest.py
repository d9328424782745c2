"""Shared fixtures: the published kCTF challenge/solution pair."""

import base64

import pytest

from kctfpow import decode_challenge


GOLDEN_CHALLENGE = "s.AAAAMg==.NDtqORW1uZlIgzszbdMGZA=="

GOLDEN_SOLUTION_B64 = (
    "NUH3arymnKB+ysUGdv+67ypDamn4wOKCPORB2ivWE1Yhinam2v4S6q4nAoC5LP97LScdVoq+"
    "NuFVF++Win5mNRYZS6bJAs8fk0h8XgvfcC/7JfmFISqeCIo/CIUgIucVAM+eGDjqitRULGXq"
    "IOyviJoJjW8DMouMRuJM/3eg/z18kutQHkX0N3sqPeF7Nzkk8S3Bs6aiHUORM30syUKYug=="
)

# Solution form emitted by deployed kCTF solvers
GOLDEN_KCTF_SOLUTION = "s." + GOLDEN_SOLUTION_B64

# Same result in the three-field solution form
GOLDEN_SOLUTION = "s.AAAAMg==." + GOLDEN_SOLUTION_B64


@pytest.fixture
def golden_challenge():
    return decode_challenge(GOLDEN_CHALLENGE)


@pytest.fixture
def golden_payload():
    return base64.b64decode(GOLDEN_SOLUTION_B64)
