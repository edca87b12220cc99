"""
Experiment driver.

Runs a batch of independent trials for each attack family and mutation
strategy, drops trials that hit the attempt cap and summarizes the rest
against the theoretical expectation.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from .analysis import (
    TrialStatistics,
    deviation_percent,
    percent_of_theory,
    summarize_trials,
    theoretical_birthday_attempts,
    theoretical_preimage_attempts,
)
from .attacks import AttackResult, birthday_attack, preimage_attack
from .config import (
    DIGEST_BITS,
    MAX_ATTEMPTS,
    SALT_RANGE,
    SimulationConfig,
    validate_bits,
)
from .log import get_logger, log_event
from .mutation import MutationStrategy

_logger = get_logger(__name__)


class AttackFamily(Enum):
    PREIMAGE = "preimage"
    BIRTHDAY = "birthday"

    @property
    def title(self) -> str:
        if self is AttackFamily.PREIMAGE:
            return "Preimage Attack"
        return "Birthday Attack"

    @property
    def message_prefix(self) -> str:
        if self is AttackFamily.PREIMAGE:
            return "preimage_trial"
        return "birthday_trial"

    @property
    def attack(self) -> Callable[..., AttackResult]:
        if self is AttackFamily.PREIMAGE:
            return preimage_attack
        return birthday_attack

    def theoretical_attempts(self, bits: int) -> float:
        if self is AttackFamily.PREIMAGE:
            return theoretical_preimage_attempts(bits)
        return theoretical_birthday_attempts(bits)


@dataclass
class ExperimentReport:
    """Outcome of one (family, strategy) batch."""

    family: AttackFamily
    strategy: MutationStrategy
    bits: int
    stats: TrialStatistics
    theoretical: float
    deviation: float
    percent_of_theory: float


@dataclass
class SimulationResults:
    config: SimulationConfig
    seed: Optional[int]
    reports: Dict[AttackFamily, List[ExperimentReport]] = field(default_factory=dict)

    def report_for(
        self, family: AttackFamily, strategy: MutationStrategy
    ) -> ExperimentReport:
        for report in self.reports[family]:
            if report.strategy is strategy:
                return report
        raise KeyError(f"No report for {family.value}/{strategy.value}")


def build_initial_message(prefix: str, index: int, rng: random.Random) -> bytes:
    """Fresh initial message for one trial, salted to decorrelate trials."""
    salt = rng.randrange(SALT_RANGE)
    return f"{prefix}_experiment_{index}_{salt}".encode()


def run_family(
    family: AttackFamily,
    bits: int,
    num_experiments: int,
    rng: random.Random,
    max_attempts: int = MAX_ATTEMPTS,
) -> List[ExperimentReport]:
    """
    Run ``num_experiments`` trials of one attack family under both strategies.

    Each trial builds one initial message and runs it sequentially first,
    then with random mutation.

    Returns:
        One ExperimentReport per mutation strategy, sequential first
    """
    validate_bits(bits, DIGEST_BITS)

    strategies = [MutationStrategy.SEQUENTIAL, MutationStrategy.RANDOM]
    successes: Dict[MutationStrategy, List[int]] = {s: [] for s in strategies}
    failures: Dict[MutationStrategy, int] = {s: 0 for s in strategies}

    log_event(
        _logger,
        "info",
        "starting batch",
        family=family.value,
        bits=bits,
        experiments=num_experiments,
    )

    for index in range(1, num_experiments + 1):
        initial = build_initial_message(family.message_prefix, index, rng)

        for strategy in strategies:
            result = family.attack(
                initial, strategy, bits, rng=rng, max_attempts=max_attempts
            )
            if result.found:
                successes[strategy].append(result.attempts)
            else:
                failures[strategy] += 1
                log_event(
                    _logger,
                    "warning",
                    "trial hit attempt cap",
                    family=family.value,
                    strategy=strategy.value,
                    trial=index,
                    cap=max_attempts,
                )

    theoretical = family.theoretical_attempts(bits)
    reports = []
    for strategy in strategies:
        stats = summarize_trials(successes[strategy], failed=failures[strategy])
        reports.append(
            ExperimentReport(
                family=family,
                strategy=strategy,
                bits=bits,
                stats=stats,
                theoretical=theoretical,
                deviation=deviation_percent(stats.mean, theoretical),
                percent_of_theory=percent_of_theory(stats.mean, theoretical),
            )
        )
        log_event(
            _logger,
            "info",
            "batch complete",
            family=family.value,
            strategy=strategy.value,
            successful=stats.successful,
            failed=stats.failed,
            mean=f"{stats.mean:.2f}",
        )

    return reports


def run_simulation(
    config: SimulationConfig, rng: Optional[random.Random] = None
) -> SimulationResults:
    """
    Run the preimage family, then the birthday family.

    A single generator seeded from ``config.seed`` (or fresh system entropy)
    drives every salt and every random mutation of the run. When the caller
    supplies ``rng`` instead, no seed is recorded.
    """
    config.validate()

    seed = None
    if rng is None:
        seed = config.seed
        if seed is None:
            seed = random.SystemRandom().randrange(2**32)
        rng = random.Random(seed)

    log_event(_logger, "info", "simulation started", seed=seed)

    results = SimulationResults(config=config, seed=seed)
    results.reports[AttackFamily.PREIMAGE] = run_family(
        AttackFamily.PREIMAGE,
        config.preimage_bits,
        config.num_experiments,
        rng,
        config.max_attempts,
    )
    results.reports[AttackFamily.BIRTHDAY] = run_family(
        AttackFamily.BIRTHDAY,
        config.birthday_bits,
        config.num_experiments,
        rng,
        config.max_attempts,
    )
    return results
