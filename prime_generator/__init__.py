"""Concurrent generator of large probable primes."""

from .errors import (
    InvalidRequest,
    PrimeGenerationError,
    RandomSourceFailure,
    WorkerExecutionFailure,
)
from .pool import PrimePool, SequentialPrimeGenerator, generate_primes
from .protocol_constants import BIT_LENGTH, MILLER_RABIN_ROUNDS, SMALL_PRIMES

__all__ = [
    "PrimePool",
    "SequentialPrimeGenerator",
    "generate_primes",
    "PrimeGenerationError",
    "InvalidRequest",
    "RandomSourceFailure",
    "WorkerExecutionFailure",
    "BIT_LENGTH",
    "MILLER_RABIN_ROUNDS",
    "SMALL_PRIMES",
]
