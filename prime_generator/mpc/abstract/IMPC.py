from abc import ABC, abstractmethod
from ..types import MPZ, RandomState


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations."""

    @staticmethod
    @abstractmethod
    def random_state(seed: int) -> RandomState:
        """Create a random state from a seed.

        Args:
            seed (int): Seed value for random state

        Returns:
            RandomState: Random state object
        """

    @staticmethod
    @abstractmethod
    def mpz_urandomb(state: RandomState, bit_count: int) -> MPZ:
        """Generate a random integer with specified number of bits.

        Args:
            state (RandomState): Random state to use
            bit_count (int): Number of bits in result

        Returns:
            mpz: Random integer
        """

    @staticmethod
    @abstractmethod
    def bit_set(value: MPZ, bit_index: int) -> MPZ:
        """Return a copy of value with the given bit set to 1.

        Args:
            value (mpz): Value to modify
            bit_index (int): Zero-based index of the bit to set

        Returns:
            mpz: Value with the bit set
        """

    @staticmethod
    @abstractmethod
    def bit_length(value: MPZ) -> int:
        """Number of significant bits in value.

        Args:
            value (mpz): Value to measure

        Returns:
            int: Bit length of value
        """

    @staticmethod
    @abstractmethod
    def is_prime(value: MPZ, rounds: int) -> bool:
        """Probabilistic primality test.

        Args:
            value (mpz): Value to test
            rounds (int): Number of Miller-Rabin rounds

        Returns:
            bool: True if value is a probable prime
        """

    @staticmethod
    @abstractmethod
    def mod(value: MPZ, modulus: int) -> MPZ:
        """Compute value % modulus.

        Args:
            value (mpz): Value to reduce
            modulus (int): Modulus to reduce by

        Returns:
            mpz: Result of modular reduction
        """
