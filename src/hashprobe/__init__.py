"""hashprobe - Preimage and birthday attack costs on truncated SHA-1."""

__version__ = "0.1.0"
__description__ = "Preimage and birthday attack costs on truncated SHA-1"

from .digest import calculate_hash, truncate_hash
from .mutation import MessageMutator, MutationStrategy
from .attacks import preimage_attack, birthday_attack
from .analysis import calculate_statistics

__all__ = [
    "calculate_hash",
    "truncate_hash",
    "MessageMutator",
    "MutationStrategy",
    "preimage_attack",
    "birthday_attack",
    "calculate_statistics",
]
