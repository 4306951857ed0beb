import logging

from ..errors import WorkerExecutionFailure
from ..mpc import MPC
from ..mpc.types import MPZ, RandomState
from ..protocol_constants import (
    BIT_LENGTH,
    MAX_CANDIDATE_DRAWS,
    MAX_FILTER_STEPS,
    SMALL_PRIMES,
)
from .abstract.ICandidateBuilder import ICandidateBuilder

logger = logging.getLogger(__name__)


class CandidateBuilder(ICandidateBuilder):
    """Builds odd, fixed-length candidates filtered against small primes."""

    @staticmethod
    def build_candidate(state: RandomState, bit_length: int = BIT_LENGTH) -> MPZ:
        for _ in range(MAX_CANDIDATE_DRAWS):
            candidate = CandidateBuilder.draw(state, bit_length)

            steps = 0
            while CandidateBuilder.is_divisible_by_small_primes(candidate):
                if steps == MAX_FILTER_STEPS:
                    raise WorkerExecutionFailure(
                        f"No candidate free of small factors within {MAX_FILTER_STEPS} steps"
                    )
                candidate += 2  # Stay odd
                steps += 1

            if MPC.bit_length(candidate) == bit_length:
                return candidate
            logger.debug("Candidate overflowed %d bits, drawing again", bit_length)

        raise WorkerExecutionFailure(
            f"No {bit_length}-bit candidate after {MAX_CANDIDATE_DRAWS} draws"
        )

    @staticmethod
    def draw(state: RandomState, bit_length: int) -> MPZ:
        """Draw a random odd integer with exactly bit_length bits, unfiltered."""
        candidate = MPC.mpz_urandomb(state, bit_length)
        candidate = MPC.bit_set(candidate, 0)
        # Setting the top bit fixes the length when the draw has leading zeros
        return MPC.bit_set(candidate, bit_length - 1)

    @staticmethod
    def is_divisible_by_small_primes(value: MPZ) -> bool:
        for prime in SMALL_PRIMES:
            if MPC.mod(value, prime) == 0:
                return True
        return False
