"""
Preimage search against a truncated digest.

The target is the truncated digest of the initial message. Candidates are
generated until one truncates to the same value or the attempt cap is hit.
"""

import random
from typing import Optional

from ..config import MAX_ATTEMPTS
from ..digest import calculate_hash, truncate_hash
from ..log import get_logger, log_event
from ..mutation import MessageMutator, MutationStrategy
from .results import AttackOutcome, AttackResult

_logger = get_logger(__name__)


def preimage_attack(
    initial: bytes,
    strategy: MutationStrategy,
    bits: int,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> AttackResult:
    """
    Search for a second message matching the initial message's truncated digest.

    Args:
        initial: Message whose truncated digest is the target
        strategy: Candidate generation strategy
        bits: Truncation width in bits
        rng: Random source for the random strategy
        max_attempts: Number of candidates tried before giving up

    Returns:
        AttackResult with FOUND and the attempt count (1-based), or
        CAP_EXCEEDED once ``max_attempts`` candidates missed.
    """
    target_hash = truncate_hash(calculate_hash(initial), bits)
    mutator = MessageMutator(initial, strategy, rng)

    for attempt in range(1, max_attempts + 1):
        candidate = mutator.next_candidate(attempt)
        candidate_hash = truncate_hash(calculate_hash(candidate), bits)

        if candidate_hash == target_hash:
            log_event(
                _logger,
                "debug",
                "preimage found",
                strategy=strategy.value,
                bits=bits,
                attempts=attempt,
                target=target_hash,
            )
            return AttackResult(
                attack="preimage",
                strategy=strategy,
                bits=bits,
                outcome=AttackOutcome.FOUND,
                attempts=attempt,
                match=candidate,
            )

    log_event(
        _logger,
        "debug",
        "preimage search exhausted",
        strategy=strategy.value,
        bits=bits,
        attempts=max_attempts,
    )
    return AttackResult(
        attack="preimage",
        strategy=strategy,
        bits=bits,
        outcome=AttackOutcome.CAP_EXCEEDED,
        attempts=max_attempts,
    )
