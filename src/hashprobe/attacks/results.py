"""Result types shared by the preimage and birthday searches."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..mutation import MutationStrategy

# Integer stand-in for a trial that ran out of attempts.
FAILED_TRIAL = -1


class AttackOutcome(Enum):
    FOUND = "found"
    CAP_EXCEEDED = "cap_exceeded"


@dataclass
class HashEntry:
    """Last message seen for a truncated digest."""

    message: bytes
    full_hash: str


@dataclass
class CollisionPair:
    """Two distinct messages sharing a truncated digest."""

    first: bytes
    second: bytes
    truncated_hash: str
    first_hash: str
    second_hash: str


@dataclass
class AttackResult:
    """Result from a single preimage or birthday search."""

    attack: str
    strategy: MutationStrategy
    bits: int
    outcome: AttackOutcome
    attempts: int
    match: Optional[Union[bytes, CollisionPair]] = None

    @property
    def found(self) -> bool:
        return self.outcome is AttackOutcome.FOUND

    @property
    def trial_value(self) -> int:
        """Attempt count on success, FAILED_TRIAL otherwise."""
        return self.attempts if self.found else FAILED_TRIAL
