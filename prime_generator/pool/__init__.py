"""Parallel prime pool module."""

from .GenerationTask import GenerationTask
from .PrimePool import PrimePool, SequentialPrimeGenerator, generate_primes
from .abstract.IPrimeGenerator import IPrimeGenerator

__all__ = [
    "GenerationTask",
    "PrimePool",
    "SequentialPrimeGenerator",
    "generate_primes",
    "IPrimeGenerator",
]
