from abc import ABC, abstractmethod
from ...mpc.types import MPZ, RandomState


class ICandidateBuilder(ABC):
    """Abstract base class defining the interface for primality test candidates."""

    @staticmethod
    @abstractmethod
    def build_candidate(state: RandomState, bit_length: int) -> MPZ:
        """Build an odd candidate of exactly bit_length bits.

        The candidate is not divisible by any of the small filter primes.

        Args:
            state (RandomState): Random state owned by the calling worker
            bit_length (int): Exact number of significant bits

        Returns:
            MPZ: The candidate

        Raises:
            WorkerExecutionFailure: If the trial caps are exhausted.
        """

    @staticmethod
    @abstractmethod
    def is_divisible_by_small_primes(value: MPZ) -> bool:
        """Check value against the small filter primes.

        Args:
            value (MPZ): Value to check

        Returns:
            bool: True if any small filter prime divides value
        """
