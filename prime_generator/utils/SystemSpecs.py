"""Utility class for system specifications and resource management."""

import multiprocessing
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


class SystemSpecs:
    """Utility class for determining system specifications and resource allocation."""

    @staticmethod
    def get_num_parallel_processes() -> int:
        """
        Calculate the number of worker processes available for prime searches.

        Returns the number of CPU cores divided by the parallelization divisor,
        with a minimum of 1. A positive PRIME_WORKER_LIMIT caps the result.

        Returns:
            int: Number of parallel processes to use
        """
        parallelism_divisor = EnvironmentManager.get_int(
            EnvironmentVariables.PARALLELISM_DIVISOR
        )
        if parallelism_divisor < 1:
            parallelism_divisor = 1
        num_processes = multiprocessing.cpu_count() // parallelism_divisor or 1

        worker_limit = EnvironmentManager.get_int(EnvironmentVariables.PRIME_WORKER_LIMIT)
        if worker_limit > 0:
            num_processes = min(num_processes, worker_limit)
        return num_processes
