"""Tests for the sequential and random message mutators."""

import random

import pytest

from hashprobe.mutation import MessageMutator, MutationStrategy, mutate_random_byte


def _differing_positions(a: bytes, b: bytes):
    return [i for i, (x, y) in enumerate(zip(a, b)) if x != y]


@pytest.mark.parametrize("value", range(256))
def test_random_mutation_never_keeps_original_byte(value):
    """Every draw must move the byte, whatever its starting value."""
    rng = random.Random(value)
    for _ in range(64):
        mutated = mutate_random_byte(bytes([value]), rng)
        assert len(mutated) == 1
        assert mutated[0] != value


def test_random_mutation_changes_exactly_one_byte(rng):
    message = b"a longer message to mutate"
    for _ in range(200):
        mutated = mutate_random_byte(message, rng)
        assert len(mutated) == len(message)
        assert len(_differing_positions(message, mutated)) == 1


def test_random_mutation_does_not_modify_input(rng):
    message = b"TEST"
    mutate_random_byte(message, rng)
    assert message == b"TEST"


def test_random_mutation_rejects_empty_message(rng):
    with pytest.raises(ValueError):
        mutate_random_byte(b"", rng)


def test_sequential_candidates_append_attempt_number(sample_message):
    mutator = MessageMutator(sample_message, MutationStrategy.SEQUENTIAL)
    assert mutator.next_candidate(1) == b"TEST1"
    assert mutator.next_candidate(2) == b"TEST2"
    assert mutator.next_candidate(12345) == b"TEST12345"


def test_sequential_mode_accepts_empty_initial_message():
    mutator = MessageMutator(b"", MutationStrategy.SEQUENTIAL)
    assert mutator.next_candidate(7) == b"7"


def test_random_candidates_build_on_previous_candidate(sample_message, rng):
    mutator = MessageMutator(sample_message, MutationStrategy.RANDOM, rng)
    previous = sample_message
    for attempt in range(1, 50):
        candidate = mutator.next_candidate(attempt)
        assert len(_differing_positions(previous, candidate)) == 1
        previous = candidate
    assert mutator.current == previous


def test_random_mode_rejects_empty_initial_message(rng):
    with pytest.raises(ValueError):
        MessageMutator(b"", MutationStrategy.RANDOM, rng)


def test_random_mode_is_reproducible_with_same_seed(sample_message):
    first = MessageMutator(sample_message, MutationStrategy.RANDOM, random.Random(5))
    second = MessageMutator(sample_message, MutationStrategy.RANDOM, random.Random(5))
    for attempt in range(1, 20):
        assert first.next_candidate(attempt) == second.next_candidate(attempt)


def test_strategy_labels():
    assert MutationStrategy.SEQUENTIAL.label == "Sequential suffixing"
    assert MutationStrategy.RANDOM.label == "Random byte mutation"
