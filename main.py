"""
Benchmark harness for the parallel prime generator.

Times the parallel prime pool against the sequential baseline and prints a
speedup summary. The sequential run uses a smaller sample because it is slow,
and its time is scaled up to the full count.

Both runs use the same filtered candidate search, so the reported speedup is
the gain from running workers in parallel, not from the candidate filter.
"""

import argparse
import logging
import multiprocessing
import time

from prime_generator import PrimePool, SequentialPrimeGenerator
from prime_generator.protocol_constants import BIT_LENGTH
from prime_generator.utils import EnvironmentManager, EnvironmentVariables, SystemSpecs


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Compare parallel and sequential generation of large probable primes."
    )
    parser.add_argument(
        "--count",
        type=int,
        default=100,
        help="Number of primes to generate in parallel (default: 100)",
    )
    parser.add_argument(
        "--sequential-count",
        type=int,
        default=10,
        help="Number of primes for the sequential baseline (default: 10)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Maximum number of worker processes (default: available CPUs)",
    )
    parser.add_argument(
        "--bits",
        type=int,
        default=BIT_LENGTH,
        help=f"Bit length of each prime (default: {BIT_LENGTH})",
    )
    return parser.parse_args()


def main() -> None:
    """Run the parallel and sequential generators and report their timings."""
    args = parse_args()

    logging.basicConfig(
        level=EnvironmentManager.get_string(EnvironmentVariables.PRIME_LOG_LEVEL).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    print("=== Performance Comparison ===")
    print(f"Available processors: {multiprocessing.cpu_count()}")
    print(f"Worker processes: {args.workers or SystemSpecs.get_num_parallel_processes()}")
    print()

    print("1. Parallel prime pool:")
    pool = PrimePool(worker_limit=args.workers, bit_length=args.bits)
    start_time = time.time()
    primes = pool.generate(args.count)
    parallel_time = time.time() - start_time
    print(f"Parallel time ({args.count} primes): {parallel_time:.2f} seconds")
    print(f"First prime found: {hex(primes[0])[:50]}...")
    print(f"Bit length of first prime: {primes[0].bit_length()}")
    print()

    print(f"2. Sequential baseline ({args.sequential_count} primes):")
    sequential = SequentialPrimeGenerator(bit_length=args.bits)
    start_time = time.time()
    sequential.generate(args.sequential_count)
    sequential_time = time.time() - start_time
    estimated_time = sequential_time * args.count / args.sequential_count
    print(f"Sequential time ({args.sequential_count} primes): {sequential_time:.2f} seconds")
    print(f"Estimated time for {args.count} primes: {estimated_time:.2f} seconds")
    print()

    print("=== Performance Summary ===")
    print(f"Parallel ({args.count} primes): {parallel_time:.2f} seconds")
    print(f"Sequential (estimated {args.count} primes): {estimated_time:.2f} seconds")
    print(f"Speedup vs sequential: {estimated_time / parallel_time:.2f}x")


if __name__ == "__main__":
    main()
