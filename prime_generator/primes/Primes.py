import logging

from ..candidates import CandidateBuilder
from ..errors import WorkerExecutionFailure
from ..mpc import MPC
from ..mpc.types import MPZ, RandomState
from ..protocol_constants import (
    BIT_LENGTH,
    MAX_CANDIDATE_DRAWS,
    MAX_SEARCH_STEPS,
    MILLER_RABIN_ROUNDS,
)
from .abstract.IPrimes import IPrimes

logger = logging.getLogger(__name__)


class Primes(IPrimes):
    """Implementation of prime number generation."""

    @staticmethod
    def search_prime(state: RandomState, bit_length: int = BIT_LENGTH) -> MPZ:
        for _ in range(MAX_CANDIDATE_DRAWS):
            candidate = CandidateBuilder.build_candidate(state, bit_length)

            # Walk the odd numbers upwards from the candidate
            for _ in range(MAX_SEARCH_STEPS):
                if MPC.bit_length(candidate) != bit_length:
                    logger.debug("Search overflowed %d bits, drawing again", bit_length)
                    break
                if Primes.is_probable_prime(candidate):
                    return candidate
                candidate += 2
            else:
                raise WorkerExecutionFailure(
                    f"No probable prime within {MAX_SEARCH_STEPS} odd values of the candidate"
                )

        raise WorkerExecutionFailure(
            f"No {bit_length}-bit probable prime after {MAX_CANDIDATE_DRAWS} draws"
        )

    @staticmethod
    def is_probable_prime(value: MPZ) -> bool:
        return MPC.is_prime(value, MILLER_RABIN_ROUNDS)
