import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ, RandomState


class MPC(IMPC):
    """Implementation of multi-precision computing operations."""

    @staticmethod
    def random_state(seed: int) -> RandomState:
        return gmpy2.random_state(seed)

    @staticmethod
    def mpz_urandomb(state: RandomState, bit_count: int) -> MPZ:
        return gmpy2.mpz_urandomb(state, bit_count)

    @staticmethod
    def bit_set(value: MPZ, bit_index: int) -> MPZ:
        return gmpy2.bit_set(value, bit_index)

    @staticmethod
    def bit_length(value: MPZ) -> int:
        return gmpy2.bit_length(value)

    @staticmethod
    def is_prime(value: MPZ, rounds: int) -> bool:
        # gmpy2 runs trial division before the Miller-Rabin rounds
        return gmpy2.is_prime(value, rounds)

    @staticmethod
    def mod(value: MPZ, modulus: int) -> MPZ:
        return value % modulus  # gmpy2 supports % operator for mpz values
