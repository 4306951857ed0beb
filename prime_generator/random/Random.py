import logging
import os
import secrets
from typing import Optional, Tuple

from ..errors import RandomSourceFailure
from ..mpc import MPC
from ..mpc.types import RandomState
from .abstract.IRandom import IRandom

logger = logging.getLogger(__name__)

# (pid, state) of the calling worker; the pid guards against forked copies
_worker_random: Optional[Tuple[int, RandomState]] = None


class Random(IRandom):
    """Implementation of secure random number generation."""

    @staticmethod
    def get_random(bit_size: int) -> RandomState:
        try:
            secure_seed = secrets.randbits(bit_size)
        except (OSError, NotImplementedError) as e:
            raise RandomSourceFailure(f"Entropy source failed: {e}") from e
        return MPC.random_state(secure_seed)

    @staticmethod
    def get_worker_random(bit_size: int) -> RandomState:
        global _worker_random
        pid = os.getpid()
        if _worker_random is None or _worker_random[0] != pid:
            logger.debug("Seeding random state for worker %d", pid)
            _worker_random = (pid, Random.get_random(bit_size))
        return _worker_random[1]
