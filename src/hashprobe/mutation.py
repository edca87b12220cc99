"""
Message mutation strategies.

Sequential mode appends the attempt number to the initial message. Random
mode flips one byte of the previous candidate to a different value, so each
random candidate builds on the one before it.
"""

import random
from enum import Enum
from typing import Optional


class MutationStrategy(Enum):
    """How candidate messages are derived from the initial message."""

    SEQUENTIAL = "sequential"
    RANDOM = "random"

    @property
    def label(self) -> str:
        if self is MutationStrategy.SEQUENTIAL:
            return "Sequential suffixing"
        return "Random byte mutation"


def mutate_random_byte(message: bytes, rng: random.Random) -> bytes:
    """
    Return a copy of ``message`` with one byte changed.

    The byte at a uniformly chosen index is shifted by ``r + 1`` modulo 256
    with ``r`` drawn from [0, 255), so it never maps onto itself.
    """
    if not message:
        raise ValueError("Cannot mutate an empty message")

    mutated = bytearray(message)
    idx = rng.randrange(len(mutated))
    mutated[idx] = (mutated[idx] + rng.randrange(255) + 1) % 256
    return bytes(mutated)


class MessageMutator:
    """Produces the candidate message for each attempt of a search."""

    def __init__(
        self,
        initial: bytes,
        strategy: MutationStrategy,
        rng: Optional[random.Random] = None,
    ):
        if strategy is MutationStrategy.RANDOM and not initial:
            raise ValueError("Random mutation needs a non-empty initial message")

        self.initial = initial
        self.strategy = strategy
        self.rng = rng if rng is not None else random.Random()
        self.current = initial

    def next_candidate(self, attempt: int) -> bytes:
        """Build the candidate for ``attempt`` (counted from 1)."""
        if self.strategy is MutationStrategy.SEQUENTIAL:
            return self.initial + str(attempt).encode()

        self.current = mutate_random_byte(self.current, self.rng)
        return self.current
