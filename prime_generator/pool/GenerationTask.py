from typing import NamedTuple


class GenerationTask(NamedTuple):
    """A request for one prime, tagged with its slot in the result list."""

    index: int
    bit_length: int
