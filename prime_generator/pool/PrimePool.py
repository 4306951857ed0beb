import logging
import multiprocessing
from concurrent.futures import ProcessPoolExecutor, as_completed
from concurrent.futures.process import BrokenProcessPool
from typing import List, Optional, Tuple

from ..errors import InvalidRequest, PrimeGenerationError, WorkerExecutionFailure
from ..mpc.types import MPZ
from ..primes import Primes
from ..protocol_constants import BIT_LENGTH, MIN_BIT_LENGTH, SEED_BIT_SIZE
from ..random import Random
from ..utils.SystemSpecs import SystemSpecs
from .GenerationTask import GenerationTask
from .abstract.IPrimeGenerator import IPrimeGenerator

logger = logging.getLogger(__name__)


class PrimePool(IPrimeGenerator):
    """Generates primes in parallel on a pool of worker processes."""

    def __init__(
        self,
        worker_limit: Optional[int] = None,
        bit_length: int = BIT_LENGTH,
        mp_context=None,
    ) -> None:
        """Initialize the pool settings. No processes are started here.

        Args:
            worker_limit (Optional[int]): Maximum number of worker processes.
                Defaults to SystemSpecs.get_num_parallel_processes().
            bit_length (int): Bit length of every generated prime
            mp_context: multiprocessing context used to start workers.
                Defaults to the platform's default context.
        """
        if worker_limit is None:
            worker_limit = SystemSpecs.get_num_parallel_processes()
        _check_positive_int(worker_limit, "worker_limit")
        _check_bit_length(bit_length)

        self._worker_limit = worker_limit
        self._bit_length = bit_length
        self._mp_context = mp_context or multiprocessing.get_context()

    def get_worker_limit(self) -> int:
        return self._worker_limit

    def get_bit_length(self) -> int:
        return self._bit_length

    def generate(self, count: int) -> List[MPZ]:
        _check_positive_int(count, "count")

        num_workers = min(count, self._worker_limit)
        tasks = [GenerationTask(index, self._bit_length) for index in range(count)]
        primes: List[Optional[MPZ]] = [None] * count

        logger.info(
            "Generating %d primes of %d bits on %d workers",
            count, self._bit_length, num_workers,
        )

        executor = None
        try:
            executor = self._create_executor(num_workers)
            futures = [executor.submit(_run_task, task) for task in tasks]

            # Tasks complete in any order, each result goes back to its own slot
            for future in as_completed(futures):
                index, prime = future.result()
                primes[index] = prime
        except PrimeGenerationError as e:
            logger.error("Prime generation batch failed: %s", e)
            raise
        except BrokenProcessPool as e:
            logger.error("Prime generation worker terminated abnormally: %s", e)
            raise WorkerExecutionFailure(f"Worker process terminated abnormally: {e}") from e
        except Exception as e:
            logger.error("Prime generation worker failed: %r", e)
            raise WorkerExecutionFailure(f"Worker failed: {e!r}") from e
        finally:
            if executor is not None:
                executor.shutdown(wait=True, cancel_futures=True)

        logger.info("Found all %d primes", count)
        return primes

    # Private Methods
    # ------------------------------------------------------------------------------

    def _create_executor(self, num_workers: int) -> ProcessPoolExecutor:
        return ProcessPoolExecutor(max_workers=num_workers, mp_context=self._mp_context)


class SequentialPrimeGenerator(IPrimeGenerator):
    """Generates primes one after another in the calling process.

    Uses the same candidate filter and search as the pool workers, so timing
    it against PrimePool measures the gain from parallelism alone.
    """

    def __init__(self, bit_length: int = BIT_LENGTH) -> None:
        _check_bit_length(bit_length)
        self._bit_length = bit_length

    def generate(self, count: int) -> List[MPZ]:
        _check_positive_int(count, "count")

        logger.info("Generating %d primes of %d bits sequentially", count, self._bit_length)
        state = Random.get_random(SEED_BIT_SIZE)
        return [Primes.search_prime(state, self._bit_length) for _ in range(count)]


def generate_primes(count: int, worker_limit: Optional[int] = None) -> List[MPZ]:
    """Generate count probable primes of BIT_LENGTH bits in parallel.

    Blocks until every prime is found. Either all count primes are returned
    or a single PrimeGenerationError is raised.

    Args:
        count (int): Number of primes, must be positive
        worker_limit (Optional[int]): Maximum number of worker processes

    Returns:
        List[MPZ]: The primes in submission order
    """
    return PrimePool(worker_limit=worker_limit).generate(count)


def _run_task(task: GenerationTask) -> Tuple[int, MPZ]:
    """Worker entry point: search one prime with the worker's own random state."""
    state = Random.get_worker_random(SEED_BIT_SIZE)
    return task.index, Primes.search_prime(state, task.bit_length)


def _check_positive_int(value, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidRequest(f"{name} must be a positive integer, got {value!r}")


def _check_bit_length(bit_length: int) -> None:
    if isinstance(bit_length, bool) or not isinstance(bit_length, int) or bit_length < MIN_BIT_LENGTH:
        raise InvalidRequest(f"bit_length must be an integer >= {MIN_BIT_LENGTH}, got {bit_length!r}")
