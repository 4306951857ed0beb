import importlib
from unittest.mock import patch

import pytest

from prime_generator.errors import RandomSourceFailure
from prime_generator.mpc import MPC
from prime_generator.random import Random

random_module = importlib.import_module("prime_generator.random.Random")


@pytest.fixture
def fresh_worker_random():
    """Fixture that clears the cached worker random state."""
    with patch.object(random_module, "_worker_random", None):
        yield

def test_get_random_returns_usable_state():
    """Test that get_random returns a state gmpy2 can draw from."""
    state = Random.get_random(256)
    assert 0 <= MPC.mpz_urandomb(state, 64) < 2**64

def test_get_random_states_are_independent():
    """Test that separately seeded states produce different streams."""
    first = MPC.mpz_urandomb(Random.get_random(256), 256)
    second = MPC.mpz_urandomb(Random.get_random(256), 256)
    assert first != second

def test_get_random_entropy_failure():
    """Test that an entropy source error is reported as RandomSourceFailure."""
    with patch.object(random_module.secrets, "randbits", side_effect=OSError("no entropy")):
        with pytest.raises(RandomSourceFailure, match="no entropy"):
            Random.get_random(256)

def test_get_worker_random_is_cached_per_process(fresh_worker_random):
    """Test that one process keeps reusing its own random state."""
    assert Random.get_worker_random(256) is Random.get_worker_random(256)

def test_get_worker_random_reseeds_in_new_process(fresh_worker_random):
    """Test that a forked process with a new pid gets a new random state."""
    parent_state = Random.get_worker_random(256)
    with patch.object(random_module.os, "getpid", return_value=-1):
        child_state = Random.get_worker_random(256)
    assert child_state is not parent_state
