"""
hashprobe Statistical Analysis

This module aggregates trial attempt counts and provides the closed-form
expectations the observed means are compared against.
"""

import math
import statistics
from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass
class TrialStatistics:
    """Statistical summary of the successful trials in a batch."""

    successful: int
    failed: int
    mean: float
    variance: float
    std_dev: float
    min_attempts: int
    max_attempts: int

    @property
    def total(self) -> int:
        return self.successful + self.failed


def calculate_statistics(results: Sequence[int]) -> Tuple[float, float]:
    """
    Compute mean and sample variance of trial attempt counts.

    Args:
        results: Attempt counts of successful trials

    Returns:
        Tuple of (mean, variance). Both are 0 for an empty batch and the
        variance is 0 for a single trial.
    """
    if not results:
        return 0.0, 0.0

    mean = float(statistics.mean(results))
    variance = float(statistics.variance(results)) if len(results) > 1 else 0.0
    return mean, variance


def summarize_trials(results: Sequence[int], failed: int = 0) -> TrialStatistics:
    """Build a TrialStatistics from successful counts and a failure tally."""
    mean, variance = calculate_statistics(results)
    return TrialStatistics(
        successful=len(results),
        failed=failed,
        mean=mean,
        variance=variance,
        std_dev=math.sqrt(variance),
        min_attempts=min(results) if results else 0,
        max_attempts=max(results) if results else 0,
    )


def theoretical_preimage_attempts(bits: int) -> float:
    """Expected preimage attempts over a ``bits``-bit space: 2^bits."""
    return float(2**bits)


def theoretical_birthday_attempts(bits: int) -> float:
    """Expected birthday attempts: sqrt(pi/2 * 2^bits), about 1.253 * sqrt(2^bits)."""
    return math.sqrt(math.pi / 2.0) * math.sqrt(2**bits)


def deviation_percent(observed: float, expected: float) -> float:
    """Absolute deviation of ``observed`` from ``expected`` in percent."""
    if expected == 0:
        raise ValueError("Expected value must be non-zero")
    return abs(observed - expected) / expected * 100


def percent_of_theory(observed: float, expected: float) -> float:
    """``observed`` as a percentage of ``expected``."""
    if expected == 0:
        raise ValueError("Expected value must be non-zero")
    return observed / expected * 100
