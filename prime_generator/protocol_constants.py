# protocol_constants.py

BIT_LENGTH = 2000  # Bit length of every generated prime

# Small primes used to reject obvious composites before the expensive test
SMALL_PRIMES = (3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47)

MILLER_RABIN_ROUNDS = 50  # False positive probability <= 4^-50 = 2^-100

# Trial caps for the candidate and search loops
MAX_FILTER_STEPS = 10_000       # +2 steps while filtering one candidate
MAX_SEARCH_STEPS = 100_000      # odd offsets tested per candidate
MAX_CANDIDATE_DRAWS = 64        # redraws after overflowing the bit length

MIN_BIT_LENGTH = 8  # Keeps every candidate above the largest filter prime
SEED_BIT_SIZE = 256  # Secure seed bits for each worker's random state
