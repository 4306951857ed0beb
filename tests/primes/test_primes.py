import importlib
from unittest.mock import patch

import pytest
from gmpy2 import mpz

from prime_generator.candidates import CandidateBuilder
from prime_generator.errors import WorkerExecutionFailure
from prime_generator.mpc import MPC
from prime_generator.primes import Primes
from prime_generator.protocol_constants import BIT_LENGTH, SMALL_PRIMES

primes_module = importlib.import_module("prime_generator.primes.Primes")


@pytest.fixture
def state():
    """Fixture for a deterministic random state."""
    return MPC.random_state(2024)

def assert_valid_prime(p, bit_length):
    assert p % 2 == 1
    assert p.bit_length() == bit_length
    assert all(p % small != 0 for small in SMALL_PRIMES)
    assert MPC.is_prime(p, 50)

@pytest.mark.parametrize("bit_length", [8, 64, 256])
def test_search_prime_small_lengths(state, bit_length):
    """Test that searched primes are valid at several bit lengths."""
    assert_valid_prime(Primes.search_prime(state, bit_length), bit_length)

def test_search_prime_default_length(state):
    """Test a full size search at the default bit length."""
    assert_valid_prime(Primes.search_prime(state), BIT_LENGTH)

def test_search_returns_prime_candidate_unchanged(state):
    """Test that a candidate which is already prime is returned as is."""
    with patch.object(CandidateBuilder, "build_candidate", return_value=mpz(251)):
        assert Primes.search_prime(state, 8) == 251

def test_search_advances_to_next_prime(state):
    """Test that the search walks the odd numbers above the candidate."""
    # 221 = 13 * 17, 223 is prime
    with patch.object(CandidateBuilder, "build_candidate", return_value=mpz(221)):
        assert Primes.search_prime(state, 8) == 223

def test_search_overflow_draws_again(state):
    """Test that running past the bit length discards the candidate."""
    # 253 = 11 * 23 and 255 are composite, 257 has 9 bits
    with patch.object(
        CandidateBuilder, "build_candidate", side_effect=[mpz(253), mpz(193)]
    ) as mock_build:
        assert Primes.search_prime(state, 8) == 193
    assert mock_build.call_count == 2

def test_search_step_cap(state):
    """Test that exhausting the search steps raises WorkerExecutionFailure."""
    with patch.object(primes_module, "MAX_SEARCH_STEPS", 1), \
         patch.object(CandidateBuilder, "build_candidate", return_value=mpz(221)):
        with pytest.raises(WorkerExecutionFailure):
            Primes.search_prime(state, 8)

@pytest.mark.parametrize("value, expected", [
    (mpz(2**521 - 1), True),
    (mpz(561), False),
    (mpz(2**61 - 1) * mpz(2**89 - 1), False),
])
def test_is_probable_prime(value, expected):
    """Test the primality test used by the search."""
    assert Primes.is_probable_prime(value) == expected
