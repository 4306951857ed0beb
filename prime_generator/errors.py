"""Errors raised while generating primes.

Every error derives from ``PrimeGenerationError`` so callers can treat a failed
batch as a single failure signal. Instances must stay picklable: they are
raised inside pool workers and re-raised in the calling process.
"""


class PrimeGenerationError(Exception):
    """Base class for prime generation failures."""


class InvalidRequest(PrimeGenerationError, ValueError):
    """The requested prime count is not a positive integer."""


class RandomSourceFailure(PrimeGenerationError):
    """The entropy source could not supply seed material."""


class WorkerExecutionFailure(PrimeGenerationError):
    """A worker terminated abnormally or exhausted its trial cap."""
