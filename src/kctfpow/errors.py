"""Exceptions raised by the proof-of-work core."""


class PowError(Exception):
    """Base class for all kctfpow errors."""


class MalformedChallengeError(PowError, ValueError):
    """A challenge or solution string does not follow the wire grammar."""


class EntropyUnavailableError(PowError, RuntimeError):
    """The operating system's secure random source could not be read."""
