"""
hashprobe Configuration

Shared simulation constants and the validated configuration object consumed
by the experiment driver and the CLI.
"""

import hashlib
from dataclasses import dataclass
from typing import Optional

# --- Simulation defaults ---
HASH_ALGORITHM = "SHA1"
DIGEST_BITS = hashlib.sha1().digest_size * 8
PREIMAGE_BITS = 16
BIRTHDAY_BITS = 32
NUM_EXPERIMENTS = 100

# A single trial gives up after this many candidate messages.
MAX_ATTEMPTS = 5_000_000

# Initial messages carry a random salt in [0, SALT_RANGE).
SALT_RANGE = 10_000

# Environment variable read for the log level.
LOG_LEVEL_ENV = "HASHPROBE_LOG_LEVEL"


def validate_bits(bits: int, max_bits: Optional[int] = None) -> None:
    """Reject bit widths that do not map onto whole hex nibbles or exceed max_bits."""
    if bits < 0:
        raise ValueError(f"Bit width must be non-negative, got {bits}")
    if bits % 4 != 0:
        raise ValueError(f"Bit width must be a multiple of 4, got {bits}")
    if max_bits is not None and bits > max_bits:
        raise ValueError(f"Bit width must be at most {max_bits}, got {bits}")


@dataclass
class SimulationConfig:
    """Parameters of one full simulation run."""

    preimage_bits: int = PREIMAGE_BITS
    birthday_bits: int = BIRTHDAY_BITS
    num_experiments: int = NUM_EXPERIMENTS
    max_attempts: int = MAX_ATTEMPTS
    seed: Optional[int] = None

    def validate(self) -> "SimulationConfig":
        validate_bits(self.preimage_bits, DIGEST_BITS)
        validate_bits(self.birthday_bits, DIGEST_BITS)
        if self.num_experiments <= 0:
            raise ValueError("Number of experiments must be positive")
        if self.max_attempts <= 0:
            raise ValueError("Attempt cap must be positive")
        return self
