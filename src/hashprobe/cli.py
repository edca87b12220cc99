import click

from hashprobe.config import (
    BIRTHDAY_BITS,
    DIGEST_BITS,
    LOG_LEVEL_ENV,
    MAX_ATTEMPTS,
    NUM_EXPERIMENTS,
    PREIMAGE_BITS,
    SimulationConfig,
)
from hashprobe.experiments import run_simulation
from hashprobe.log import setup_logging
from hashprobe.report import render_report


def _nibble_bits(ctx, param, value):
    if value < 0 or value % 4 != 0:
        raise click.BadParameter("must be a non-negative multiple of 4")
    if value > DIGEST_BITS:
        raise click.BadParameter(f"must be at most {DIGEST_BITS}, the digest length")
    return value


@click.command("hashprobe")
@click.option(
    "--preimage-bits",
    type=int,
    default=PREIMAGE_BITS,
    show_default=True,
    callback=_nibble_bits,
    help="Digest bits kept for the preimage search.",
)
@click.option(
    "--birthday-bits",
    type=int,
    default=BIRTHDAY_BITS,
    show_default=True,
    callback=_nibble_bits,
    help="Digest bits kept for the birthday search.",
)
@click.option(
    "--experiments",
    type=click.IntRange(min=1),
    default=NUM_EXPERIMENTS,
    show_default=True,
    help="Trials per attack family and strategy.",
)
@click.option(
    "--max-attempts",
    type=click.IntRange(min=1),
    default=MAX_ATTEMPTS,
    show_default=True,
    help="Attempt cap for a single trial.",
)
@click.option("--seed", type=int, default=None, help="Seed for a reproducible run.")
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level for diagnostics on stderr.",
)
def main(preimage_bits, birthday_bits, experiments, max_attempts, seed, log_level):
    """Measures preimage and birthday attack costs on a truncated SHA-1."""
    setup_logging(log_level)

    config = SimulationConfig(
        preimage_bits=preimage_bits,
        birthday_bits=birthday_bits,
        num_experiments=experiments,
        max_attempts=max_attempts,
        seed=seed,
    )
    try:
        results = run_simulation(config)
    except ValueError as e:
        raise click.ClickException(f"Invalid simulation settings: {e}")

    render_report(results)


if __name__ == "__main__":
    main()
