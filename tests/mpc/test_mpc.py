import pytest
from gmpy2 import mpz

from prime_generator.mpc import MPC


def test_bit_set_sets_low_and_high_bits():
    """Test that bit_set forces the lowest and highest bits of an empty value."""
    value = MPC.bit_set(MPC.bit_set(mpz(0), 0), 15)
    assert value == 2**15 + 1
    assert MPC.bit_length(value) == 16

def test_bit_set_keeps_already_set_bit():
    """Test that setting a bit that is already 1 leaves the value unchanged."""
    assert MPC.bit_set(mpz(5), 0) == 5

def test_mpz_urandomb_is_deterministic_for_seed():
    """Test that equal seeds produce equal draws of the requested size."""
    first = MPC.mpz_urandomb(MPC.random_state(42), 128)
    second = MPC.mpz_urandomb(MPC.random_state(42), 128)
    assert first == second
    assert 0 <= first < 2**128

@pytest.mark.parametrize("value, expected", [
    (mpz(2), True),
    (mpz(97), True),
    (mpz(2**127 - 1), True),
    (mpz(561), False),           # Carmichael number
    (mpz(2**128 + 1), False),
])
def test_is_prime(value, expected):
    """Test the probabilistic primality test on known primes and composites."""
    assert MPC.is_prime(value, 50) == expected

def test_mod():
    """Test modular reduction of an mpz by a small int."""
    assert MPC.mod(mpz(47 * 1000 + 3), 47) == 3
