from abc import ABC, abstractmethod
from typing import List
from ...mpc.types import MPZ


class IPrimeGenerator(ABC):
    """Abstract base class defining the interface for batch prime generation."""

    @abstractmethod
    def generate(self, count: int) -> List[MPZ]:
        """Generate a batch of probable primes.

        Args:
            count (int): Number of primes to generate, must be positive

        Returns:
            List[MPZ]: Exactly count probable primes

        Raises:
            InvalidRequest: If count is not a positive integer.
            PrimeGenerationError: If any prime in the batch fails.
        """
