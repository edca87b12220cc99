"""
Attack searches against truncated digests.

Main Components:
- preimage: search for a message matching a fixed truncated digest
- birthday: search for two messages sharing a truncated digest
- results: tagged result types returned by both searches

Example Usage:
    import random
    from hashprobe.attacks import birthday_attack
    from hashprobe.mutation import MutationStrategy

    result = birthday_attack(b"TEST", MutationStrategy.RANDOM, 16, random.Random(7))
    if result.found:
        print(result.attempts, result.match.truncated_hash)

Note: These searches are for teaching purposes only. They show how cost
scales with digest length and say nothing about the strength of full SHA-1.
"""

from .birthday import birthday_attack
from .preimage import preimage_attack
from .results import (
    FAILED_TRIAL,
    AttackOutcome,
    AttackResult,
    CollisionPair,
    HashEntry,
)

__all__ = [
    "preimage_attack",
    "birthday_attack",
    "FAILED_TRIAL",
    "AttackOutcome",
    "AttackResult",
    "CollisionPair",
    "HashEntry",
]
