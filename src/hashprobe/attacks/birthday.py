"""
Birthday collision search against a truncated digest.

Every candidate's truncated digest is remembered together with the message
that produced it. The search stops at the first truncated digest shared by
two different messages.
"""

import random
from typing import Dict, Optional

from ..config import MAX_ATTEMPTS
from ..digest import calculate_hash, truncate_hash
from ..log import get_logger, log_event
from ..mutation import MessageMutator, MutationStrategy
from .results import AttackOutcome, AttackResult, CollisionPair, HashEntry

_logger = get_logger(__name__)


def birthday_attack(
    initial: bytes,
    strategy: MutationStrategy,
    bits: int,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> AttackResult:
    """
    Find two distinct messages with the same truncated digest.

    A candidate equal to the message already stored under its truncated
    digest is a repeat, not a collision: the entry is refreshed and the
    search goes on.

    Returns:
        AttackResult with FOUND, the attempt count and the CollisionPair, or
        CAP_EXCEEDED once ``max_attempts`` candidates produced no collision.
    """
    seen_hashes: Dict[str, HashEntry] = {}
    mutator = MessageMutator(initial, strategy, rng)

    for attempt in range(1, max_attempts + 1):
        candidate = mutator.next_candidate(attempt)
        full_hash = calculate_hash(candidate)
        trunc_hash = truncate_hash(full_hash, bits)

        entry = seen_hashes.get(trunc_hash)
        if entry is not None and entry.message != candidate:
            pair = CollisionPair(
                first=entry.message,
                second=candidate,
                truncated_hash=trunc_hash,
                first_hash=entry.full_hash,
                second_hash=full_hash,
            )
            log_event(
                _logger,
                "debug",
                "collision found",
                strategy=strategy.value,
                bits=bits,
                attempts=attempt,
                truncated=trunc_hash,
                first=entry.full_hash,
                second=full_hash,
            )
            return AttackResult(
                attack="birthday",
                strategy=strategy,
                bits=bits,
                outcome=AttackOutcome.FOUND,
                attempts=attempt,
                match=pair,
            )

        seen_hashes[trunc_hash] = HashEntry(message=candidate, full_hash=full_hash)

    log_event(
        _logger,
        "debug",
        "birthday search exhausted",
        strategy=strategy.value,
        bits=bits,
        attempts=max_attempts,
        distinct=len(seen_hashes),
    )
    return AttackResult(
        attack="birthday",
        strategy=strategy,
        bits=bits,
        outcome=AttackOutcome.CAP_EXCEEDED,
        attempts=max_attempts,
    )
