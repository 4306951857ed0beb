from abc import ABC, abstractmethod
from ...mpc.types import MPZ, RandomState


class IPrimes(ABC):
    """Abstract base class defining the interface for prime number generation."""

    @staticmethod
    @abstractmethod
    def search_prime(state: RandomState, bit_length: int) -> MPZ:
        """Get a random probable prime of exactly bit_length bits.

        Args:
            state (RandomState): Random state owned by the calling worker
            bit_length (int): Number of bits for the prime number

        Returns:
            MPZ: A random probable prime

        Raises:
            WorkerExecutionFailure: If the trial caps are exhausted.
        """

    @staticmethod
    @abstractmethod
    def is_probable_prime(value: MPZ) -> bool:
        """Run the primality test used by the search.

        Args:
            value (MPZ): Value to test

        Returns:
            bool: True if value is a probable prime
        """
