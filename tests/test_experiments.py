"""Tests for configuration validation and the experiment driver."""

import random

import pytest

from hashprobe.config import (
    BIRTHDAY_BITS,
    MAX_ATTEMPTS,
    NUM_EXPERIMENTS,
    PREIMAGE_BITS,
    SALT_RANGE,
    SimulationConfig,
)
from hashprobe.experiments import (
    AttackFamily,
    build_initial_message,
    run_family,
    run_simulation,
)
from hashprobe.mutation import MutationStrategy


def _small_config(seed=42):
    return SimulationConfig(
        preimage_bits=8, birthday_bits=8, num_experiments=3, seed=seed
    )


def test_default_config_matches_constants():
    config = SimulationConfig()
    assert config.preimage_bits == PREIMAGE_BITS == 16
    assert config.birthday_bits == BIRTHDAY_BITS == 32
    assert config.num_experiments == NUM_EXPERIMENTS == 100
    assert config.max_attempts == MAX_ATTEMPTS == 5_000_000
    assert config.validate() is config


@pytest.mark.parametrize(
    "overrides",
    [
        {"preimage_bits": 6},
        {"birthday_bits": -4},
        {"preimage_bits": 200},
        {"birthday_bits": 2048},
        {"num_experiments": 0},
        {"max_attempts": 0},
    ],
)
def test_invalid_config_is_rejected(overrides):
    with pytest.raises(ValueError):
        SimulationConfig(**overrides).validate()


def test_initial_message_format(rng):
    message = build_initial_message("preimage_trial", 3, rng).decode()
    prefix, salt = message.rsplit("_", 1)
    assert prefix == "preimage_trial_experiment_3"
    assert 0 <= int(salt) < SALT_RANGE


def test_initial_message_is_reproducible():
    first = build_initial_message("p", 1, random.Random(8))
    second = build_initial_message("p", 1, random.Random(8))
    assert first == second


def test_run_family_reports_both_strategies(rng):
    reports = run_family(AttackFamily.PREIMAGE, 8, 5, rng)
    assert [r.strategy for r in reports] == [
        MutationStrategy.SEQUENTIAL,
        MutationStrategy.RANDOM,
    ]
    for report in reports:
        assert report.family is AttackFamily.PREIMAGE
        assert report.bits == 8
        assert report.theoretical == 256
        assert report.stats.total == 5
        assert report.stats.successful == 5
        assert report.stats.mean > 0


def test_run_family_excludes_capped_trials(rng):
    reports = run_family(AttackFamily.BIRTHDAY, 160, 4, rng, max_attempts=5)
    for report in reports:
        assert report.stats.successful == 0
        assert report.stats.failed == 4
        assert report.stats.mean == 0
        assert report.deviation == pytest.approx(100.0)


def test_family_theory():
    assert AttackFamily.PREIMAGE.theoretical_attempts(8) == 256
    assert AttackFamily.BIRTHDAY.theoretical_attempts(8) == pytest.approx(20.053, rel=1e-3)


def test_run_simulation_covers_both_families():
    results = run_simulation(_small_config())
    assert results.seed == 42
    for family in AttackFamily:
        assert len(results.reports[family]) == 2
        for strategy in MutationStrategy:
            report = results.report_for(family, strategy)
            assert report.stats.successful == 3


def test_run_simulation_is_reproducible_with_seed():
    first = run_simulation(_small_config(seed=7))
    second = run_simulation(_small_config(seed=7))
    for family in AttackFamily:
        for strategy in MutationStrategy:
            assert (
                first.report_for(family, strategy).stats
                == second.report_for(family, strategy).stats
            )


def test_run_simulation_without_seed_records_one():
    results = run_simulation(_small_config(seed=None))
    assert isinstance(results.seed, int)


def test_run_simulation_validates_config():
    with pytest.raises(ValueError):
        run_simulation(SimulationConfig(preimage_bits=6))


def test_widest_digest_width_is_accepted():
    assert SimulationConfig(preimage_bits=160, birthday_bits=160).validate()


def test_run_family_rejects_width_beyond_digest(rng):
    with pytest.raises(ValueError):
        run_family(AttackFamily.PREIMAGE, 200, 1, rng, max_attempts=1)


def test_run_simulation_with_external_generator_records_no_seed():
    results = run_simulation(_small_config(seed=42), rng=random.Random(0))
    assert results.seed is None
    assert results.report_for(
        AttackFamily.PREIMAGE, MutationStrategy.SEQUENTIAL
    ).stats.successful == 3
