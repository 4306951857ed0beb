from abc import ABC, abstractmethod
from ...mpc.types import RandomState


class IRandom(ABC):
    """Abstract base class defining the interface for random number generation."""

    @staticmethod
    @abstractmethod
    def get_random(bit_size: int) -> RandomState:
        """Get a fresh random state initialized with a secure seed.

        Args:
            bit_size (int): Number of bits for the secure seed.

        Returns:
            RandomState: A random state initialized with a secure seed

        Raises:
            RandomSourceFailure: If the entropy source cannot supply a seed.
        """

    @staticmethod
    @abstractmethod
    def get_worker_random(bit_size: int) -> RandomState:
        """Get the random state owned by the current worker process.

        The state is created on first use in each process and reused for
        every later call in that process.

        Args:
            bit_size (int): Number of bits for the secure seed.

        Returns:
            RandomState: The random state of the calling process
        """
