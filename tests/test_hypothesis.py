"""
Property-Based Testing with Hypothesis

These tests use Hypothesis to generate random inputs and verify the
protocol properties hold for all cases, not just the golden vectors.
"""

import pytest
from hypothesis import given, strategies as st, settings, assume

from kctfpow import (
    ChallengeParams, MalformedChallengeError, MODULUS, MAX_DIFFICULTY,
    encode, decode, solve, solve_payload, check, check_kctf, solve_kctf,
)
from kctfpow.field import MersenneElement
from kctfpow.work import sloth_root, sloth_square, matches_up_to_sign


# Work is linear in difficulty; keep generated difficulties small
small_difficulties = st.integers(min_value=0, max_value=4)
seeds = st.binary(max_size=64)


@st.composite
def challenges(draw):
    return ChallengeParams(difficulty=draw(small_difficulties), seed=draw(seeds))


# =============================================================================
# PROPERTY: ROUND TRIP
# =============================================================================

class TestRoundTrip:

    @given(difficulty=st.integers(min_value=0, max_value=MAX_DIFFICULTY), payload=st.binary())
    @settings(max_examples=300)
    def test_decode_inverts_encode(self, difficulty, payload):
        assert decode(encode(difficulty, payload)) == (difficulty, payload)

    @given(difficulty=st.integers(min_value=0, max_value=MAX_DIFFICULTY), payload=st.binary())
    def test_encoding_is_ascii_three_fields(self, difficulty, payload):
        text = encode(difficulty, payload)
        assert text.isascii()
        assert len(text.split('.')) == 3
        assert '-' not in text and '_' not in text

    @given(value=st.integers(min_value=0, max_value=int(MODULUS) - 1))
    def test_element_bytes(self, value):
        element = MersenneElement(value)
        assert MersenneElement.from_bytes(element.to_bytes()) == element
        assert not element.to_bytes().startswith(b'\x00')


# =============================================================================
# PROPERTY: MALFORMED INPUT NEVER DECODES PARTIALLY
# =============================================================================

class TestMalformed:

    @given(text=st.text(max_size=40))
    @settings(max_examples=500)
    def test_decode_raises_or_returns_full_result(self, text):
        try:
            difficulty, payload = decode(text)
        except MalformedChallengeError:
            return
        assert 0 <= difficulty <= MAX_DIFFICULTY
        assert isinstance(payload, bytes)
        # Anything that decodes is the canonical spelling of its value
        assert encode(difficulty, payload) == text

    @given(text=st.text(max_size=40).filter(lambda s: '.' not in s))
    def test_dotless_strings_are_malformed(self, text):
        with pytest.raises(MalformedChallengeError):
            decode(text)


# =============================================================================
# PROPERTY: SOLVE / CHECK
# =============================================================================

class TestSolveCheck:

    @given(chall=challenges())
    @settings(max_examples=50, deadline=None)
    def test_deterministic(self, chall):
        assert solve(chall) == solve(chall)

    @given(chall=challenges())
    @settings(max_examples=50, deadline=None)
    def test_verifier_agreement(self, chall):
        assert check(chall, solve(chall)) is True

    @given(chall=challenges(), other=challenges())
    @settings(max_examples=50, deadline=None)
    def test_incorrect_detection(self, chall, other):
        assume(solve_payload(chall) != solve_payload(other))
        assert check(chall, solve(other)) is False

    @given(chall=challenges())
    @settings(max_examples=50, deadline=None)
    def test_kctf_agreement(self, chall):
        assume(chall.value % int(MODULUS) != 0)
        assert check_kctf(chall, solve_kctf(chall)) is True

    @given(seed=seeds)
    def test_zero_difficulty_is_reduced_seed(self, seed):
        chall = ChallengeParams(difficulty=0, seed=seed)
        assert solve_payload(chall) == MersenneElement.from_bytes(seed).to_bytes()

    @given(value=st.integers(min_value=1, max_value=int(MODULUS) - 1), difficulty=small_difficulties)
    @settings(max_examples=50, deadline=None)
    def test_unwinding(self, value, difficulty):
        x = MersenneElement(value)
        assert matches_up_to_sign(x, sloth_square(sloth_root(x, difficulty), difficulty))
